"""Known file names and descriptions used by the convention scanner."""

from __future__ import annotations

from typing import Dict, FrozenSet, Tuple

SERVICE_DEFAULT_FEATURES: Dict[str, str] = {
    "ANcpSdkOpenTelemetryConfiguration": "OpenTelemetry (logging, metrics, tracing with OTLP export)",
    "ANcpSdkDevLogsConfiguration": "DevLogs (browser console to server logs)",
    "ANcpSdkHttpsConfiguration": "HTTPS redirection and HSTS",
    "ANcpSdkForwardedHeadersConfiguration": "Forwarded headers for reverse proxies",
    "ANcpSdkAntiForgeryConfiguration": "Anti-forgery token configuration",
    "ANcpSdkStaticAssetsConfiguration": "Static file serving with proper caching",
    "ANcpSdkOpenApiConfiguration": "OpenAPI/Swagger documentation",
}

EDITORCONFIG_PURPOSES: Dict[str, str] = {
    "CodingStyle.editorconfig": "Code style settings (indentation, spacing, etc.)",
    "NamingConvention.editorconfig": "Naming conventions for types, members, parameters",
    "Analyzers.editorconfig": "Master analyzer configuration",
    "GeneratedFiles.editorconfig": "Suppresses warnings in generated code",
}
ANALYZER_EDITORCONFIG_PREFIX = "Analyzer."
DEFAULT_EDITORCONFIG_PURPOSE = "Configuration file"

DEFAULT_BANNED_SYMBOLS_FILE = "BannedSymbols.txt"
DEFAULT_BANNED_SYMBOLS_DESCRIPTION = "Default banned APIs (use TimeProvider instead of legacy time APIs)"
JSON_BANNED_SYMBOLS_DESCRIPTION = "Bans legacy JSON library in favor of System.Text.Json"
EXTRA_BANNED_SYMBOLS_DESCRIPTION = "Additional banned APIs"

RUN_SETTINGS_FILE = "default.runsettings"

MIN_POLYFILL_FRAMEWORK = "netstandard2.0"
NO_DESCRIPTION = "No description"

USER_CONFIGURABLE_PROPERTIES: FrozenSet[str] = frozenset(
    name.lower()
    for name in (
        "GenerateClaudeMd",
        "InjectSharedThrow",
        "InjectSourceGenHelpers",
        "InjectFakeLogger",
        "InjectLockPolyfill",
        "InjectTimeProviderPolyfill",
        "AutoRegisterServiceDefaults",
        "IncludeDefaultBannedSymbols",
        "EnableNETAnalyzers",
        "EnforceCodeStyleInBuild",
        "TreatWarningsAsErrors",
        "Nullable",
        "ImplicitUsings",
        "IsPackable",
    )
)
USER_CONFIGURABLE_PREFIXES: Tuple[str, ...] = ("Inject", "Generate")
IGNORED_BUILD_ELEMENTS: FrozenSet[str] = frozenset({"PropertyGroup", "ItemGroup"})

PROPERTY_DESCRIPTIONS: Dict[str, str] = {
    "GenerateClaudeMd": "Generate CLAUDE.md file for AI assistants",
    "InjectSharedThrow": "Inject Throw.IfNull() guard clauses",
    "InjectSourceGenHelpers": "Inject Roslyn source generator utilities",
    "InjectFakeLogger": "Inject FakeLogger test extensions",
    "InjectLockPolyfill": "Inject System.Threading.Lock polyfill",
    "InjectTimeProviderPolyfill": "Inject TimeProvider polyfill",
    "AutoRegisterServiceDefaults": "Auto-register service defaults in Web SDK",
    "IncludeDefaultBannedSymbols": "Include default banned API list",
    "EnableNETAnalyzers": "Enable .NET analyzers",
    "EnforceCodeStyleInBuild": "Enforce code style during build",
    "TreatWarningsAsErrors": "Treat all warnings as errors",
    "Nullable": "Nullable reference types setting",
    "ImplicitUsings": "Enable implicit global usings",
    "IsPackable": "Whether project can be packed as NuGet",
}
DEFAULT_PROPERTY_DESCRIPTION = "MSBuild property"

# Filename substring -> category, first match wins.
PROPERTY_CATEGORIES: Tuple[Tuple[str, str], ...] = (
    ("Testing", "Testing"),
    ("Web", "Web SDK"),
    ("Legacy", "Polyfills"),
    ("Enforcement", "Enforcement"),
)
DEFAULT_PROPERTY_CATEGORY = "General"

# Page file -> navigation label, in manifest order.
CONVENTION_PAGES: Tuple[Tuple[str, str], ...] = (
    ("index.md", "Overview"),
    ("variants.md", "SDK Variants"),
    ("msbuild-properties.md", "MSBuild Properties"),
    ("service-defaults.md", "Service Defaults"),
    ("polyfills.md", "Polyfills"),
    ("extensions.md", "Extensions"),
    ("shared-utilities.md", "Shared Utilities"),
    ("banned-apis.md", "Banned APIs"),
    ("configuration-files.md", "Configuration Files"),
    ("testing.md", "Testing"),
)
