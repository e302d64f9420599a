# src/hardener/core/hardener.py
"""Hardener construction and the harden() call surface.

Example:
    realm = Realm()
    harden = create_hardener(realm.intrinsics(), model=realm)
    config = harden(realm.new_object({"retries": 3}))

A call either returns its root, transitively immutable, with every newly
hardened node committed to the fringe, or raises and commits nothing.
Nodes hardened in place before a failure stay hardened; that is a valid
terminal state for each node on its own.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from hardener.contracts.config import HardenerOptions
from hardener.contracts.errors import ConfigError
from hardener.contracts.host import FringeSet, HostValueModel
from hardener.core.fringe import WeakFringe
from hardener.core.logging import get_logger
from hardener.core.node import NodeHardener
from hardener.core.walker import HardenPass

logger = get_logger(__name__)


class Hardener:
    """A harden function bound to one fringe and one host model.

    Instances are callable; hardener(root) is hardener.harden(root).

    Thread Safety:
        NOT thread-safe. Overlapping calls sharing a fringe must be
        serialized by the caller.
    """

    def __init__(self, model: HostValueModel, fringe: FringeSet, options: HardenerOptions) -> None:
        self._model = model
        self._fringe = fringe
        self._options = options
        self._node_hardener = NodeHardener(model, options.prepare_hook)

    @property
    def fringe(self) -> FringeSet:
        """The fringe this hardener commits to."""
        return self._fringe

    @property
    def options(self) -> HardenerOptions:
        return self._options

    def harden(self, root: Any) -> Any:
        """Make root and everything reachable from it immutable.

        Args:
            root: Any value. Non-composite values are returned unchanged.

        Returns:
            root itself.

        Raises:
            TypeKindError: A reachable value has an unrecognized kind.
            UnreachablePrototypeError: A prototype in the graph is neither
                fringed nor reachable. Nothing is committed.

        Commit is atomic only if the fringe set's add() never raises. A
        supplied set that fails mid-commit keeps the nodes added before
        the failure; the call is still logged as aborted and re-raised.
        """
        walk = HardenPass(self._model, self._fringe, self._node_hardener)
        try:
            walk.enqueue(root, "root")
            walk.dequeue()
            walk.check_prototypes()
            walk.commit()
        except Exception as e:
            logger.warning(
                "harden_aborted",
                error_type=type(e).__name__,
                processed_count=len(walk.work_set),
            )
            raise
        logger.debug(
            "harden_committed",
            node_count=len(walk.work_set),
            prototype_count=len(walk.prototypes),
        )
        return root

    __call__ = harden


def create_hardener(
    initial_fringe: Iterable[Any] | None = None,
    options: HardenerOptions | Mapping[str, Any] | None = None,
    *,
    model: HostValueModel,
) -> Hardener:
    """Create a hardener.

    Args:
        initial_fringe: Nodes treated as already hardened (usually the host's
            intrinsics). Never modified or traversed.
        options: HardenerOptions or a mapping of its fields.
        model: Host value model the hardener operates through.

    Returns:
        A callable Hardener.

    Raises:
        ConfigError: If options fail validation, including a fringe_set
            without callable add() and has().
    """
    if options is None:
        options = HardenerOptions()
    elif not isinstance(options, HardenerOptions):
        try:
            options = HardenerOptions.model_validate(options)
        except ValidationError as e:
            raise ConfigError(f"Invalid hardener options: {e}") from e

    initial = () if initial_fringe is None else initial_fringe
    fringe: FringeSet
    if options.fringe_set is not None:
        fringe = options.fringe_set
        for node in initial:
            fringe.add(node)
    else:
        fringe = WeakFringe(initial)

    return Hardener(model, fringe, options)
