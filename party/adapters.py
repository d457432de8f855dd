"""Production collaborators for GreetingWorkflow."""
import logging
from collections.abc import Callable, Mapping, Sequence

import click

from party.config import PartyConfig
from party.model import Category, Greeter, LookupFailure, Visitor, VisitorLister

logger = logging.getLogger(__name__)


class InMemoryVisitorLister(VisitorLister):
    """Serves visitor lists from a fixed category mapping.

    A category missing from the mapping is a lookup failure; an empty list is not.
    """

    def __init__(self, guests: Mapping[Category, Sequence[Visitor]]) -> None:
        self._guests = {Category.parse(c): list(v) for c, v in guests.items()}

    @classmethod
    def from_config(cls, config: PartyConfig) -> "InMemoryVisitorLister":
        return cls(config.guests)

    def list_visitors(self, category: Category) -> list[Visitor]:
        if category not in self._guests:
            raise LookupFailure(category, f"no guest list for {category.value} visitors")
        visitors = list(self._guests[category])
        logger.debug("Listed %d %s visitors", len(visitors), category.value)
        return visitors


class ConsoleGreeter(Greeter):
    def __init__(
        self,
        template: str = "Hello, {name}!",
        echo: Callable[[str], None] = click.echo,
    ) -> None:
        self.template = template
        self._echo = echo

    def hello(self, full_name: str) -> None:
        self._echo(self.template.format(name=full_name))
