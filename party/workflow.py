"""The greeting workflow: list nice (and optionally not-nice) visitors, then greet them."""
import logging

from party.model import Category, Greeter, LookupFailure, Visitor, VisitorLister

logger = logging.getLogger(__name__)


class GreetingWorkflow:
    def __init__(self, visitor_lister: VisitorLister, greeter: Greeter) -> None:
        self.visitor_lister = visitor_lister
        self.greeter = greeter

    def greet_visitors(self, just_nice: bool) -> None:
        """Greet nice visitors, then not-nice ones unless ``just_nice`` is set.

        Every list is fetched before the first greeting, so a lookup failure
        leaves no greeting behind.

        Raises:
            LookupFailure: listing any queried category failed.
        """
        categories = [Category.NICE] if just_nice else [Category.NICE, Category.NOT_NICE]
        groups = [self._list(category) for category in categories]

        greeted = 0
        for visitors in groups:
            for visitor in visitors:
                self.greeter.hello(visitor.full_name)
                greeted += 1
        logger.debug("Greeted %d visitors (just_nice=%s)", greeted, just_nice)

    def _list(self, category: Category) -> list[Visitor]:
        try:
            return self.visitor_lister.list_visitors(category)
        except LookupFailure as e:
            logger.warning("Listing %s visitors failed: %s", category.value, e)
            raise
