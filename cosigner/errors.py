class CosignerError(Exception):
    pass


class TargetNotFound(CosignerError):
    def __init__(self, target_name: str):
        super().__init__(f"No target named '{target_name}' in project")
        self.target_name = target_name


class ConfigurationNotFound(CosignerError):
    def __init__(self, target_name: str, configuration_name: str):
        super().__init__(
            f"Target '{target_name}' has no build configuration named '{configuration_name}'"
        )
        self.target_name = target_name
        self.configuration_name = configuration_name


class ProjectNotFound(CosignerError):
    def __init__(self, path):
        super().__init__(f"Project file not found: {path}")
        self.path = path


class ProjectLoadFailure(CosignerError):
    def __init__(self, path):
        super().__init__(f"Failed to load project: {path}")
        self.path = path


class PersistenceFailure(CosignerError):
    def __init__(self, path):
        super().__init__(f"Failed to save project: {path}")
        self.path = path


class UnsupportedPlatform(CosignerError):
    def __init__(self, platform: str):
        super().__init__(f"Platform '{platform}' is not supported (expected ios or mac)")
        self.platform = platform
