# staffgap/services/policy_service.py

import copy
from typing import Dict, Mapping, Optional

from loguru import logger

from staffgap.core.constants import CONTROLLABLE_FEATURES, INITIAL_PERMISSIONS, NUC_REQUIREMENTS
from staffgap.models.enums import AcademicRank, UserRole
from staffgap.schemas.common import OperationResult

FEATURES_BY_KEY = {feature["key"]: feature for feature in CONTROLLABLE_FEATURES}


class PolicyStore:
    """NUC requirement table and the per-role feature permission table, both Admin-editable."""

    def __init__(
        self,
        requirements: Optional[Mapping[AcademicRank, int]] = None,
        permissions: Optional[Mapping[str, Mapping[UserRole, bool]]] = None,
    ):
        source = NUC_REQUIREMENTS if requirements is None else requirements
        self._requirements: Dict[AcademicRank, int] = {AcademicRank(r): int(c) for r, c in source.items()}
        self._permissions = copy.deepcopy(dict(INITIAL_PERMISSIONS if permissions is None else permissions))

    # ------------------------------------------------------------
    # Requirement table
    # ------------------------------------------------------------
    @property
    def requirements(self) -> Dict[AcademicRank, int]:
        return dict(self._requirements)

    def update_requirements(self, requirements: Mapping) -> OperationResult:
        try:
            table = {AcademicRank(rank): int(count) for rank, count in requirements.items()}
        except (TypeError, ValueError):
            return OperationResult.fail("Requirement table contains an unknown rank or a non-numeric value.")

        if any(count < 0 for count in table.values()):
            return OperationResult.fail("Requirement values cannot be negative.")

        self._requirements = table
        summary = ", ".join(f"{rank.value}={count}" for rank, count in table.items())
        logger.info(f"NUC requirements updated: {summary}")
        return OperationResult.ok("NUC requirements updated.")

    # ------------------------------------------------------------
    # Permission table
    # ------------------------------------------------------------
    @property
    def permissions(self) -> Dict[str, Dict[UserRole, bool]]:
        return copy.deepcopy(self._permissions)

    def is_allowed(self, role: UserRole, feature: str) -> bool:
        if role == UserRole.ADMIN:
            return True
        return bool(self._permissions.get(feature, {}).get(role, False))

    def allowed_features(self, role: UserRole) -> list[str]:
        return [key for key in FEATURES_BY_KEY if self.is_allowed(role, key)]

    def set_permission(self, feature: str, role: UserRole, enabled: bool) -> OperationResult:
        definition = FEATURES_BY_KEY.get(feature)
        if definition is None:
            return OperationResult.fail(f"Unknown feature '{feature}'.")

        if role not in definition["applies_to"]:
            return OperationResult.fail(f"Feature '{feature}' does not apply to role '{role.value}'.")

        self._permissions.setdefault(feature, {})[role] = enabled
        logger.info(f"Permission '{feature}' for {role.value} set to {enabled}")
        return OperationResult.ok("Permissions updated successfully.")
