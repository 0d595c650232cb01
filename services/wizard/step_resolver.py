# -*- coding: utf-8 -*-
"""
Step content resolution for multi-step wizards.

A wizard is an ordered list of slots. A slot is either a fixed
StepDescriptor or a RoleBranch, whose field set is chosen by the role the
user selected earlier in the flow.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Union

from models.wizard import Role, StepDescriptor


@dataclass(frozen=True)
class RoleBranch:
    """A step whose content depends on the selected role."""
    step_id: str
    title: str
    variants: Dict[Role, StepDescriptor] = field(default_factory=dict)

    def resolve(self, role: Role) -> StepDescriptor:
        if role is None or role not in self.variants:
            return StepDescriptor.placeholder(self.step_id, self.title)
        return self.variants[role]


StepSlot = Union[StepDescriptor, RoleBranch]


class StepContentResolver:
    """Resolves which field set is active for a step index."""

    def __init__(self, steps: Sequence[StepSlot]):
        if not steps:
            raise ValueError("A wizard needs at least one step")
        self._steps: List[StepSlot] = list(steps)

    @property
    def step_count(self) -> int:
        return len(self._steps)

    def is_branched(self, step_index: int) -> bool:
        """Whether the step's content depends on the discriminator."""
        return isinstance(self._slot(step_index), RoleBranch)

    def get_step_title(self, step_index: int) -> str:
        return self._slot(step_index).title

    def get_step_titles(self) -> List[str]:
        return [slot.title for slot in self._steps]

    def resolve_step(self, step_index: int, discriminator: Any = None) -> StepDescriptor:
        """
        Get the descriptor for a step.

        Args:
            step_index: Index of the step
            discriminator: Selected role (Role or raw form value); ignored by fixed steps

        Returns:
            The step's descriptor. A role-dependent step with no role chosen
            resolves to a placeholder with nothing to validate.
        """
        slot = self._slot(step_index)
        if isinstance(slot, RoleBranch):
            return slot.resolve(Role.from_value(discriminator))
        return slot

    def _slot(self, step_index: int) -> StepSlot:
        if not 0 <= step_index < len(self._steps):
            raise IndexError(
                f"Invalid step index: {step_index} (valid range: 0-{len(self._steps) - 1})"
            )
        return self._steps[step_index]
