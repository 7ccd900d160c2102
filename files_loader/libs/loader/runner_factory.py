"""Fragment runner factory.

Responsibilities:
1) Keep the provider registry (name -> class).
2) Create the runner named by `settings.loader.runner`.
3) Give a clear, actionable error when the configuration is wrong.
"""

from __future__ import annotations

from typing import Any

from files_loader.libs.loader.base_runner import BaseFragmentRunner
from files_loader.libs.loader.python_runner import PythonFragmentRunner


class RunnerFactory:
    """Registry-based runner factory."""

    _PROVIDERS: dict[str, type[BaseFragmentRunner]] = {}

    @classmethod
    def register_provider(
        cls,
        provider_name: str,
        provider_class: type[BaseFragmentRunner],
    ) -> None:
        """Register a runner implementation.

        Args:
            provider_name: Runner name (e.g. `python`), matched case-insensitively.
            provider_class: Runner class, must inherit from BaseFragmentRunner.
        """

        normalized_name = provider_name.strip().lower()
        if not normalized_name:
            raise ValueError("Provider name cannot be empty")

        if not isinstance(provider_class, type) or not issubclass(provider_class, BaseFragmentRunner):
            raise ValueError("Provider class must inherit from BaseFragmentRunner")

        cls._PROVIDERS[normalized_name] = provider_class

    @classmethod
    def create(cls, settings: Any, **overrides: Any) -> BaseFragmentRunner:
        """Create the runner named by `settings.loader.runner`.

        Args:
            settings: Settings object; `settings.loader.runner` must be set.
            **overrides: Constructor overrides for this instance.
        """

        loader_settings = getattr(settings, "loader", None)
        runner_raw = getattr(loader_settings, "runner", None)

        if not isinstance(runner_raw, str) or not runner_raw.strip():
            raise ValueError(
                "Missing required configuration: settings.loader.runner. "
                "Please set the runner provider in settings.yaml"
            )

        runner_class = cls._PROVIDERS.get(runner_raw.strip().lower())
        if runner_class is None:
            available_providers = cls.list_providers()
            available_text = ", ".join(available_providers) if available_providers else "none"
            raise ValueError(
                f"Unsupported runner provider: '{runner_raw}'. "
                f"Available providers: {available_text}."
            )

        runner_constructor: Any = runner_class
        return runner_constructor(settings=settings, **overrides)

    @classmethod
    def list_providers(cls) -> list[str]:
        """Return registered provider names in alphabetical order."""

        return sorted(cls._PROVIDERS.keys())


RunnerFactory.register_provider("python", PythonFragmentRunner)
