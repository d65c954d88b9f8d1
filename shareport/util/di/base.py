"""Base classes for dependency injection providers.

Infrastructure that tests replace (the clock, the guest link store) is
grouped into named components. Each component has a base provider class
with a production subclass and, under ``tests/di``, a mock subclass.
"""

from typing import ClassVar, Literal, get_args

from dishka import Provider

Component = Literal["clock", "persistence"]

# Every component name a container may be asked to mock or unmock
COMPONENTS: frozenset[str] = frozenset(get_args(Component))


class ProviderBase(Provider):
    """Base for all DI providers.

    Attributes:
        __mock_component__: Component this provider implements, or None for
            providers that are never swapped (config, domain, use cases)
        __is_mock__: True for test doubles
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
