"""Dependency injection container."""

from typing import Dict, Any, Callable, Optional, TypeVar, Type

T = TypeVar("T")


class Container:
    """
    Dependency injection container.

    Holds the collaborators of plugin provisioning (settings, config loader,
    plugin locator, installer, signature checker) so that they can be
    swapped out in tests.
    """

    def __init__(self):
        """Initialize container."""
        self._singletons: Dict[str, Any] = {}
        self._factories: Dict[str, Callable] = {}

    def register_singleton(self, name: str, instance: Any) -> None:
        """
        Register a singleton instance.

        Args:
            name: Dependency name
            instance: Instance to register
        """
        self._singletons[name] = instance

    def register_factory(self, name: str, factory: Callable[[], Any]) -> None:
        """
        Register a factory function for singleton creation.

        Args:
            name: Dependency name
            factory: Factory function that creates the instance
        """
        self._singletons.pop(name, None)
        self._factories[name] = factory

    def register_type(
        self,
        name: str,
        cls: Type[T],
        *args,
        **kwargs
    ) -> None:
        """
        Register a type built lazily as a singleton.

        Args:
            name: Dependency name
            cls: Class to instantiate
            *args: Constructor arguments
            **kwargs: Constructor keyword arguments
        """
        self.register_factory(name, lambda: cls(*args, **kwargs))

    def resolve(self, name: str) -> Any:
        """
        Resolve a dependency by name.

        Args:
            name: Dependency name

        Returns:
            Resolved instance

        Raises:
            KeyError: If dependency not registered
        """
        if name in self._singletons:
            return self._singletons[name]

        if name in self._factories:
            instance = self._factories[name]()
            self._singletons[name] = instance
            return instance

        raise KeyError(f"Dependency '{name}' not registered")

    def clear(self) -> None:
        """Clear all dependencies."""
        self._singletons.clear()
        self._factories.clear()


# Global container instance
_container: Optional[Container] = None


def get_container() -> Container:
    """
    Get global container instance.

    Returns:
        Container instance
    """
    global _container
    if _container is None:
        _container = Container()
        _setup_default_dependencies(_container)
    return _container


def _setup_default_dependencies(container: Container) -> None:
    """
    Setup default dependencies.

    Args:
        container: Container to configure
    """
    from lintplug.config import ConfigLoader
    from lintplug.models import get_settings
    from lintplug.plugins import PluginInstaller, PluginLocator, SignatureChecker

    container.register_factory("Settings", get_settings)
    container.register_type("ConfigLoader", ConfigLoader)
    container.register_type("PluginLocator", PluginLocator)
    container.register_factory(
        "PluginInstaller",
        lambda: PluginInstaller(
            locator=container.resolve("PluginLocator"), settings=container.resolve("Settings")
        ),
    )
    # Checkers are built per plugin
    container.register_singleton("SignatureChecker", SignatureChecker)


def reset_container() -> None:
    """Reset the global container (useful for testing)."""
    global _container
    if _container:
        _container.clear()
    _container = None
