"""Assignment of unique declared names to class nodes."""

import logging
from typing import Iterable, Optional

from ..models import ClassForest
from ..types import ForestStageInterface
from ..utils.naming import NamingContext, capitalize_key

ROOT_CLASS_NAME = "Root"


class Namer(ForestStageInterface):
    """
    Gives every class node a unique name.

    The root is always ``Root``. Every other node is named after the
    capitalized key it was first discovered under, visiting nodes in
    pre-order so the first node to want a name gets the bare form.
    Names in ``reserved_names`` are never handed out.
    """

    def __init__(self, logger: Optional[logging.Logger] = None,
                 reserved_names: Iterable[str] = ()):
        self.logger = logger or logging.getLogger(__name__)
        self.reserved_names = frozenset(reserved_names)

    def run(self, forest: ClassForest) -> ClassForest:
        return self.assign_names(forest)

    def assign_names(self, forest: ClassForest,
                     context: Optional[NamingContext] = None) -> ClassForest:
        context = context or NamingContext(self.reserved_names)
        forest.root.declared_name = context.claim(ROOT_CLASS_NAME)

        for node in forest:
            if node.id == forest.root_id:
                continue
            base_name = capitalize_key(node.origin_key)
            node.declared_name = context.claim(base_name)
            if node.declared_name != base_name:
                self.logger.debug(f"Name '{base_name}' already taken, "
                                  f"using '{node.declared_name}'")

        return forest
