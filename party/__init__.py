"""
Party - greet your visitors, nice ones first.

A small greeting service built around dependency injection: a
``GreetingWorkflow`` lists visitors through a ``VisitorLister`` and greets
them through a ``Greeter``, both supplied by the caller.
"""

__version__ = "0.1.0"

# Core abstractions
from party.model import (
    Category,
    Greeter,
    LookupFailure,
    Visitor,
    VisitorLister,
)

# Workflow
from party.workflow import GreetingWorkflow

# Configuration
from party.config import (
    ConfigError,
    PartyConfig,
    load_config,
    load_party_toml,
)

# Production collaborators
from party.adapters import ConsoleGreeter, InMemoryVisitorLister

# Testing helpers
from party.testing import CallLog, RecordingGreeter, StubVisitorLister, assert_greeted

__all__ = [
    # Version
    "__version__",
    # Core
    "Category",
    "Greeter",
    "LookupFailure",
    "Visitor",
    "VisitorLister",
    # Workflow
    "GreetingWorkflow",
    # Config
    "ConfigError",
    "PartyConfig",
    "load_config",
    "load_party_toml",
    # Adapters
    "ConsoleGreeter",
    "InMemoryVisitorLister",
    # Testing
    "CallLog",
    "RecordingGreeter",
    "StubVisitorLister",
    "assert_greeted",
]
