import os
from dataclasses import dataclass
from typing import Dict, List, Optional

from cosigner.settings import DEFAULT_CODE_SIGN_IDENTITY, DEFAULT_CODE_SIGN_STYLE

SUPPORTED_PLATFORMS = ("ios", "mac")


@dataclass(frozen=True)
class Option:
    key: str
    env_name: str
    description: str
    default_value: Optional[str] = None
    optional: bool = False

    @property
    def flag(self) -> str:
        return "--" + self.key.replace("_", "-")

    def env_default(self, environ=None) -> Optional[str]:
        environ = os.environ if environ is None else environ
        return environ.get(self.env_name, self.default_value)


OPTIONS: List[Option] = [
    Option("xcodeproj_path", "PROJECT_PATH", "The Project Path"),
    Option("scheme", "SCHEME", "Scheme"),
    Option("build_configuration", "BUILD_CONFIGURATION", "Build configuration (Debug, Release, ...)"),
    Option(
        "code_sign_style",
        "CODE_SIGN_STYLE",
        "Code Sign (Provisioning) style (Automatic, Manual)",
        default_value=DEFAULT_CODE_SIGN_STYLE,
    ),
    Option(
        "code_sign_identity",
        "CODE_SIGN_IDENTITY",
        "Code signing identity type (iPhone Development, iPhone Distribution)",
        default_value=DEFAULT_CODE_SIGN_IDENTITY,
    ),
    Option("profile_name", "PROVISIONING_PROFILE_SPECIFIER", "Provisioning profile name to use for code signing"),
    Option(
        "profile_uuid",
        "PROVISIONING_PROFILE",
        "Provisioning profile UUID to use for code signing",
        optional=True,
    ),
    Option("development_team", "TEAM_ID", "Development team identifier", optional=True),
    Option("bundle_identifier", "APP_IDENTIFIER", "Application Product Bundle Identifier", optional=True),
]

OPTIONS_BY_KEY: Dict[str, Option] = {option.key: option for option in OPTIONS}


def is_supported(platform: str) -> bool:
    return platform in SUPPORTED_PLATFORMS
