from __future__ import annotations


class CreateEthAppError(RuntimeError):
    pass


class FrameworkNotFoundError(CreateEthAppError):
    def __init__(self, framework: str):
        super().__init__(f"Framework not found: {framework}")
        self.framework = framework


class TemplateNotFoundError(CreateEthAppError):
    def __init__(self, template: str, *, framework: str | None = None):
        super().__init__(f"Template not found: {template}")
        self.template = template
        self.framework = framework
