from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Tuple

from pbxproj.PBXGenericObject import PBXGenericObject

from cosigner.locator import get_or_create

DEFAULT_CODE_SIGN_STYLE = "Manual"
DEFAULT_CODE_SIGN_IDENTITY = "iPhone Distribution"

BUILD_SETTINGS = "buildSettings"
TARGET_ATTRIBUTES = "TargetAttributes"


@dataclass
class SigningParameters:
    profile_name: str
    code_sign_style: str = DEFAULT_CODE_SIGN_STYLE
    code_sign_identity: str = DEFAULT_CODE_SIGN_IDENTITY
    # None means "leave whatever the project has"
    profile_uuid: Optional[str] = None
    development_team: Optional[str] = None
    bundle_identifier: Optional[str] = None


class SettingUpdate(NamedTuple):
    parameter: str
    value: str
    # (scope, key) pairs, scope is BUILD_SETTINGS or TARGET_ATTRIBUTES
    writes: Tuple[Tuple[str, str], ...]

    @property
    def keys(self) -> List[str]:
        return [key for _, key in self.writes]


def plan(params: SigningParameters) -> List[SettingUpdate]:
    # ProvisioningStyle is what Xcode 8 reads, CODE_SIGN_STYLE is Xcode 9+;
    # likewise the sdk-qualified identity. Unknown keys are ignored so both are written.
    updates = [
        SettingUpdate(
            "code_sign_style",
            params.code_sign_style,
            ((TARGET_ATTRIBUTES, "ProvisioningStyle"), (BUILD_SETTINGS, "CODE_SIGN_STYLE")),
        ),
        SettingUpdate(
            "code_sign_identity",
            params.code_sign_identity,
            ((BUILD_SETTINGS, "CODE_SIGN_IDENTITY"), (BUILD_SETTINGS, "CODE_SIGN_IDENTITY[sdk=iphoneos*]")),
        ),
        SettingUpdate(
            "profile_name",
            params.profile_name,
            ((BUILD_SETTINGS, "PROVISIONING_PROFILE_SPECIFIER"),),
        ),
    ]
    optional = [
        ("profile_uuid", params.profile_uuid, "PROVISIONING_PROFILE"),
        ("development_team", params.development_team, "DEVELOPMENT_TEAM"),
        ("bundle_identifier", params.bundle_identifier, "PRODUCT_BUNDLE_IDENTIFIER"),
    ]
    for parameter, value, key in optional:
        if value is not None:
            updates.append(SettingUpdate(parameter, value, ((BUILD_SETTINGS, key),)))
    return updates


def apply(
    target: PBXGenericObject,
    build_settings: PBXGenericObject,
    target_attributes: PBXGenericObject,
    params: SigningParameters,
) -> None:
    attributes = get_or_create(target_attributes, target.get_id())
    scopes = {BUILD_SETTINGS: build_settings, TARGET_ATTRIBUTES: attributes}
    for update in plan(params):
        for scope, key in update.writes:
            scopes[scope][key] = update.value
