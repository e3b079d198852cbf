import logging
from typing import NamedTuple

from pbxproj import XcodeProject
from pbxproj.PBXGenericObject import PBXGenericObject

from cosigner.errors import ConfigurationNotFound, TargetNotFound

logger = logging.getLogger(__name__)


class Handles(NamedTuple):
    target: PBXGenericObject
    build_settings: PBXGenericObject
    # document level TargetAttributes map, keyed by target id
    target_attributes: PBXGenericObject


def get_or_create(container: PBXGenericObject, key: str) -> PBXGenericObject:
    """Returns container[key], creating an empty map there first if it is missing."""
    value = container[key]
    if value is None:
        value = PBXGenericObject(parent=container)
        container[key] = value
    return value


def find_target(project: XcodeProject, target_name: str) -> PBXGenericObject:
    objects = project["objects"]
    root_object = objects[project["rootObject"]]
    matches = []
    for target_pointer in root_object["targets"] or []:
        target_object = objects[target_pointer]
        if target_object is not None and target_object["name"] == target_name:
            matches.append(target_object)
    if not matches:
        raise TargetNotFound(target_name)
    if len(matches) > 1:
        logger.warning(
            "Found %d targets named '%s' (%s), using the first one in project order",
            len(matches),
            target_name,
            ", ".join(match.get_id() for match in matches),
        )
    return matches[0]


def find_configuration(
    project: XcodeProject, target: PBXGenericObject, configuration_name: str
) -> PBXGenericObject:
    objects = project["objects"]
    configuration_list_pointer = target["buildConfigurationList"]
    configuration_list = objects[configuration_list_pointer] if configuration_list_pointer else None
    if configuration_list is not None:
        for configuration_pointer in configuration_list["buildConfigurations"] or []:
            configuration = objects[configuration_pointer]
            if configuration is not None and configuration["name"] == configuration_name:
                return configuration
    raise ConfigurationNotFound(target["name"], configuration_name)


def locate(project: XcodeProject, target_name: str, configuration_name: str) -> Handles:
    """
    Resolves the target, its build settings for configuration_name and the
    project's TargetAttributes map.

    Both lookups happen before anything is written, so a failed lookup leaves
    the document untouched. After a successful call the TargetAttributes
    entry for the target is guaranteed to exist.
    """
    target = find_target(project, target_name)
    configuration = find_configuration(project, target, configuration_name)
    logger.debug(
        "Resolved target %s (%s), configuration %s", target_name, target.get_id(), configuration.get_id()
    )

    root_object = project["objects"][project["rootObject"]]
    attributes = get_or_create(root_object, "attributes")
    target_attributes = get_or_create(attributes, "TargetAttributes")
    get_or_create(target_attributes, target.get_id())
    build_settings = get_or_create(configuration, "buildSettings")
    return Handles(target, build_settings, target_attributes)
