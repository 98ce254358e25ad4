from __future__ import annotations

from typing import Any, Callable, ClassVar, List, Mapping, Optional, TypeVar

from hydramodel.engine import dependents, hydration, identity, reset

D = TypeVar("D")


class HydratableModel:
    """Base class giving a registered model the instance-level hydration operations.

    Subclasses declare ``data_configuration`` (and optionally the hook lists
    and ``unique_object_id_prefix``) and must be passed to ``register`` before
    the first instance is created. Constructing an instance hydrates it.

    Classes that cannot inherit from this one get the same behaviour from the
    module-level functions in ``hydramodel.engine``.
    """

    data_configuration: ClassVar[Mapping[str, Any]]
    on_before_fill: ClassVar[List[Callable[[Any, Any], Any]]]
    on_after_fill: ClassVar[List[Callable[[Any], Any]]]
    unique_object_id_prefix: ClassVar[str]

    def __init__(self, data: Any = None):
        self.fill_data(data)

    # --- Hydration ---
    def fill_data(self, data: Any = None) -> "HydratableModel":
        return hydration.fill_data(self, data)

    def empty_data(self, data: Optional[Mapping[str, Any]] = None) -> None:
        reset.empty_data(self, data)

    # --- Notifications ---
    def after_fill(self, callback: Callable[[Any], Any]) -> Callable[[], None]:
        return dependents.after_fill(self, callback)

    def create_dependent_object(self, dependent: D, updater: Callable[..., Any], args: Any = None) -> D:
        return dependents.create_dependent_object(self, dependent, updater, args)

    # --- Metadata ---
    def generate_unique_object_id(self) -> None:
        identity.generate_unique_object_id(self)

    def update_fill_flag(self) -> None:
        identity.update_fill_flag(self)
