"""
Stand-in for an API module whose prerequisite credential is missing.
"""

from typing import Any, Callable, NoReturn

from dydx_client.base_models import ModuleNotSupportedError


class NotSupportedModule:
    """
    Mirrors the public operations of ``module_cls``; each one raises
    ``ModuleNotSupportedError`` as soon as it is called, before any I/O.
    """

    def __init__(self, name: str, module_cls: type, requirement: str):
        self._name = name
        self._module_cls = module_cls
        self._requirement = requirement

    def __getattr__(self, attribute: str) -> Callable[..., NoReturn]:
        if attribute.startswith("_") or not callable(getattr(self._module_cls, attribute, None)):
            raise AttributeError(attribute)

        message = (
            f"{self._name}.{attribute} is not supported: "
            f"client was not initialized with {self._requirement}"
        )

        def not_supported(*args: Any, **kwargs: Any) -> NoReturn:
            raise ModuleNotSupportedError(message)

        return not_supported

    def __repr__(self) -> str:
        return f"NotSupportedModule({self._name!r}, requires={self._requirement!r})"
