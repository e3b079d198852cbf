from pathlib import Path
from typing import Callable, List, Optional, Union

from cosigner.errors import (
    ConfigurationNotFound,
    CosignerError,
    PersistenceFailure,
    ProjectLoadFailure,
    ProjectNotFound,
    TargetNotFound,
    UnsupportedPlatform,
)
from cosigner.locator import Handles, locate
from cosigner.project import open_project, save_project
from cosigner.reporting import log_updates
from cosigner.settings import SettingUpdate, SigningParameters, apply, plan


def cosign(
    xcodeproj_path: Union[str, Path],
    scheme: str,
    build_configuration: str,
    params: SigningParameters,
    reporter: Optional[Callable[[List[SettingUpdate]], None]] = None,
) -> List[SettingUpdate]:
    """
    Rewrites the code signing settings of `scheme`/`build_configuration` in
    the given project and saves it. Returns the updates that were written.
    """
    project = open_project(xcodeproj_path)
    handles = locate(project, scheme, build_configuration)
    apply(handles.target, handles.build_settings, handles.target_attributes, params)
    updates = plan(params)
    (reporter or log_updates)(updates)
    save_project(project)
    return updates


__all__ = [
    "ConfigurationNotFound",
    "CosignerError",
    "Handles",
    "PersistenceFailure",
    "ProjectLoadFailure",
    "ProjectNotFound",
    "SettingUpdate",
    "SigningParameters",
    "TargetNotFound",
    "UnsupportedPlatform",
    "apply",
    "cosign",
    "locate",
    "plan",
]
