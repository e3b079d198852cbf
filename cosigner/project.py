import logging
from pathlib import Path
from typing import Optional, Union

from pbxproj import XcodeProject

from cosigner.errors import PersistenceFailure, ProjectLoadFailure, ProjectNotFound

logger = logging.getLogger(__name__)

PBXPROJ_NAME = "project.pbxproj"


def resolve_project_file(path: Union[str, Path]) -> Path:
    """Accepts either an .xcodeproj bundle or the project.pbxproj inside it."""
    path = Path(path)
    if path.suffix == ".xcodeproj" or path.is_dir():
        path = path / PBXPROJ_NAME
    if not path.is_file():
        raise ProjectNotFound(path)
    return path


def open_project(path: Union[str, Path]) -> XcodeProject:
    pbxproj_path = resolve_project_file(path)
    logger.debug("Loading project %s", pbxproj_path)
    try:
        return XcodeProject.load(str(pbxproj_path))
    except Exception as e:
        raise ProjectLoadFailure(pbxproj_path) from e


def save_project(project: XcodeProject, path: Optional[Union[str, Path]] = None) -> None:
    """Writes the whole document in one save. Nothing is retried or rolled back."""
    target_path = str(path) if path is not None else None
    logger.debug("Saving project %s", target_path or project._pbxproj_path)
    try:
        project.save(target_path)
    except Exception as e:
        raise PersistenceFailure(target_path or project._pbxproj_path) from e
