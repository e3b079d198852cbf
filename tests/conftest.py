import itertools

import pytest
from pbxproj import XcodeProject


def make_tree(targets, target_attributes=None, with_attributes=True):
    """
    Builds a minimal project.pbxproj tree.

    targets is a list of (name, {configuration name: build settings dict}).
    Returns (tree, {target name: [target ids]}).
    """
    counter = itertools.count(1)

    def new_id():
        return f"{next(counter):024X}"

    objects = {}
    project_id = new_id()
    project_list_id = new_id()
    project_config_id = new_id()
    objects[project_config_id] = {"isa": "XCBuildConfiguration", "name": "Release", "buildSettings": {}}
    objects[project_list_id] = {
        "isa": "XCConfigurationList",
        "buildConfigurations": [project_config_id],
        "defaultConfigurationIsVisible": "0",
    }

    target_ids = []
    ids_by_name = {}
    for name, configurations in targets:
        target_id = new_id()
        list_id = new_id()
        config_ids = []
        for config_name, settings in configurations.items():
            config_id = new_id()
            objects[config_id] = {
                "isa": "XCBuildConfiguration",
                "name": config_name,
                "buildSettings": dict(settings),
            }
            config_ids.append(config_id)
        objects[list_id] = {
            "isa": "XCConfigurationList",
            "buildConfigurations": config_ids,
            "defaultConfigurationIsVisible": "0",
        }
        objects[target_id] = {
            "isa": "PBXNativeTarget",
            "name": name,
            "productName": name,
            "buildConfigurationList": list_id,
        }
        target_ids.append(target_id)
        ids_by_name.setdefault(name, []).append(target_id)

    project = {
        "isa": "PBXProject",
        "buildConfigurationList": project_list_id,
        "targets": target_ids,
    }
    if with_attributes:
        project["attributes"] = {"LastUpgradeCheck": "1500"}
        if target_attributes is not None:
            project["attributes"]["TargetAttributes"] = target_attributes(ids_by_name)
    objects[project_id] = project

    tree = {
        "archiveVersion": "1",
        "classes": {},
        "objectVersion": "50",
        "objects": objects,
        "rootObject": project_id,
    }
    return tree, ids_by_name


def make_project(targets, path="project.pbxproj", **kwargs):
    tree, ids_by_name = make_tree(targets, **kwargs)
    return XcodeProject(tree, str(path)), ids_by_name


@pytest.fixture()
def app_project():
    project, _ = make_project(
        [
            ("App", {"Debug": {"PRODUCT_NAME": "App"}, "Release": {}}),
            ("AppTests", {"Debug": {}, "Release": {}}),
        ]
    )
    return project


@pytest.fixture()
def project_file(tmp_path):
    bundle = tmp_path / "App.xcodeproj"
    bundle.mkdir()
    pbxproj_path = bundle / "project.pbxproj"
    project, _ = make_project(
        [("App", {"Debug": {}, "Release": {"PROVISIONING_PROFILE": "OLD-UUID"}})],
        path=pbxproj_path,
    )
    project.save()
    return bundle


@pytest.fixture()
def project_factory():
    return make_project
