"""Interaction flows — likely user paths through the screen."""

from __future__ import annotations

import re
from collections.abc import Sequence

from screensight.engine.config import EngineConfig
from screensight.engine.spatial import PairwiseIndex
from screensight.models.relationships import FlowAction, FlowKind, FlowStep, InteractionFlow
from screensight.models.scene import Component, ComponentType

SUBMIT_RE = re.compile(r"submit|send|save|register", re.IGNORECASE)


def form_flows(
    components: Sequence[Component], index: PairwiseIndex, config: EngineConfig,
) -> list[InteractionFlow]:
    """One flow per submit button: every input within ``flow_distance``, then the button."""
    flows: list[InteractionFlow] = []
    for b, button in enumerate(components):
        if button.type != ComponentType.BUTTON or not SUBMIT_RE.search(button.text):
            continue
        inputs = [
            i for i in index.within(b, config.flow_distance)
            if components[i].type == ComponentType.INPUT
        ]
        if not inputs:
            continue
        flows.append(InteractionFlow(
            kind=FlowKind.FORM_SUBMISSION,
            steps=[
                *(FlowStep(component_id=components[i].id, action=FlowAction.INPUT) for i in inputs),
                FlowStep(component_id=button.id, action=FlowAction.SUBMIT),
            ],
            confidence=config.flow_confidence,
            description="User fills form inputs and submits",
        ))
    return flows


def navigation_flows(components: Sequence[Component], config: EngineConfig) -> list[InteractionFlow]:
    """Hook for link-to-destination flows; needs cross-screen data."""
    return []


def cta_flows(components: Sequence[Component], config: EngineConfig) -> list[InteractionFlow]:
    """Hook for call-to-action flows."""
    return []


def interaction_flows(
    components: Sequence[Component], index: PairwiseIndex, config: EngineConfig,
) -> list[InteractionFlow]:
    return [
        *form_flows(components, index, config),
        *navigation_flows(components, config),
        *cta_flows(components, config),
    ]
