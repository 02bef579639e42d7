"""
Hub Proxy Factory

Abstract factory pattern for creating hub proxy instances from configuration.
This decouples application code from the concrete subscription registry.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from .core.interfaces import IHubProxy
from .core.hub_proxy import HubProxy
from .common.config import get_hub_config, to_bool
from .common.logger import get_logger

logger = get_logger("hub_event_framework.factory")


class HubProxyFactory(ABC):
    """Abstract factory for creating hub proxy instances"""

    @abstractmethod
    def create_hub_proxy(
        self,
        hub_name: str,
        config: Dict[str, Any]
    ) -> IHubProxy:
        """
        Create a hub proxy instance

        Args:
            hub_name: Name of the hub
            config: Dispatch configuration for the hub

        Returns:
            IHubProxy instance
        """
        pass


class InMemoryHubProxyFactory(HubProxyFactory):
    """Factory for creating in-memory hub proxies"""

    def create_hub_proxy(
        self,
        hub_name: str,
        config: Dict[str, Any]
    ) -> IHubProxy:
        proxy = HubProxy(
            hub_name=hub_name,
            isolate_handler_errors=to_bool(config.get('isolate_handler_errors'), True),
            strict_conversion=to_bool(config.get('strict_conversion'), False)
        )
        logger.debug(
            f"Created in-memory hub proxy '{hub_name}' "
            f"(isolate_handler_errors={proxy.isolate_handler_errors}, strict_conversion={proxy.strict_conversion})"
        )
        return proxy


class HubProxyFactoryRegistry:
    """Registry for hub proxy factories"""

    _factories: Dict[str, HubProxyFactory] = {}

    @classmethod
    def register_factory(cls, proxy_type: str, factory: HubProxyFactory) -> None:
        """
        Register a hub proxy factory

        Args:
            proxy_type: Type identifier for the proxy (e.g., 'memory')
            factory: Factory instance
        """
        cls._factories[proxy_type] = factory
        logger.debug(f"Registered hub proxy factory for type: {proxy_type}")

    @classmethod
    def get_factory(cls, proxy_type: str) -> HubProxyFactory:
        """
        Get a factory for the specified proxy type

        Raises:
            ValueError: If no factory is registered for the proxy type
        """
        if proxy_type not in cls._factories:
            raise ValueError(f"No factory registered for hub proxy type: {proxy_type}")

        return cls._factories[proxy_type]

    @classmethod
    def create_hub_proxy(
        cls,
        hub_name: str,
        config: Optional[Dict[str, Any]] = None,
        proxy_type: Optional[str] = None
    ) -> IHubProxy:
        """
        Create a hub proxy using the appropriate factory

        Args:
            hub_name: Name of the hub
            config: Dispatch configuration (loaded from the config file if None)
            proxy_type: Type of proxy to create (taken from config, default 'memory')

        Returns:
            IHubProxy instance
        """
        if config is None:
            config = get_hub_config(hub_name)

        if proxy_type is None:
            proxy_type = config.get('proxy_type', 'memory')

        factory = cls.get_factory(proxy_type)
        return factory.create_hub_proxy(hub_name, config)


# Register default factories
HubProxyFactoryRegistry.register_factory('memory', InMemoryHubProxyFactory())


def create_hub_proxy(
    hub_name: str,
    config: Optional[Dict[str, Any]] = None,
    proxy_type: Optional[str] = None
) -> IHubProxy:
    """
    Convenience function to create a hub proxy instance

    Args:
        hub_name: Name of the hub
        config: Dispatch configuration (loaded from the config file if None)
        proxy_type: Type of proxy to create

    Returns:
        IHubProxy instance
    """
    return HubProxyFactoryRegistry.create_hub_proxy(hub_name, config, proxy_type)
