"""Pytest configuration and fixtures for bridge & torch tests."""

import random

import pytest


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def registry():
    """Provide an empty actor registry."""
    from bridge_torch.registry import ActorRegistry

    return ActorRegistry()


@pytest.fixture
def model():
    """Provide a model initialized from the default four-actor preset."""
    from bridge_torch.model import BridgeModel

    return BridgeModel()


@pytest.fixture
def far_side_preset():
    """Capacity 2, durations 3/7/8 at start and 2 already at the end."""
    from bridge_torch.actors import ActorTemplate
    from bridge_torch.presets import Preset

    return Preset(
        "Far side",
        2,
        [
            ActorTemplate("Ana", 3),
            ActorTemplate("Ben", 7),
            ActorTemplate("Cal", 8),
            ActorTemplate("Dee", 2, "end"),
        ],
        "start",
    )


@pytest.fixture
def valid_configuration():
    """A well-formed external configuration object."""
    return {
        "name": "Valid",
        "bridgeWidth": 2,
        "people": [
            {"name": "Louise", "crossTime": 1},
            {"name": "Mark", "crossTime": 2, "side": "start"},
            {"name": "Anne", "crossTime": 5, "side": "end"},
        ],
        "torchSide": "start",
    }
