"""InterpreterContext: the single mutable state object shared by every command.

Input state lives in the InputStack and Scanner, defaults in the environment
stack, and everything a command produces goes to the scene graph. Commands
receive the context and nothing else.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from picscript.engine.config import InterpreterConfig
from picscript.engine.environment import EnvironmentStack
from picscript.engine.errors import ErrorChannel
from picscript.engine.items import BoxItem, FontBinding, Item
from picscript.engine.labels import LAST, LabelTable
from picscript.engine.macros import MacroStore
from picscript.engine.scanner import Scanner
from picscript.engine.source import InputStack, LineReader
from picscript.scene.graph import SceneGraph
from picscript.text.variables import VariableStore


@dataclass
class InterpreterContext:
    config: InterpreterConfig
    errors: ErrorChannel
    source: InputStack
    scanner: Scanner
    env: EnvironmentStack
    variables: VariableStore
    macros: MacroStore = field(default_factory=MacroStore)
    labels: LabelTable = field(default_factory=LabelTable)
    scene: SceneGraph = field(default_factory=SceneGraph)

    # Item that the next drawing command is placed relative to
    base_item: Item | None = None
    fonts: dict[int, FontBinding] = field(default_factory=dict)

    # Drawn frame around the whole picture ("boundingbox" command)
    frame: BoxItem | None = None
    frame_offset: int = 0

    # Point given by "join ... to <position>" in the current command
    joined: tuple[int, int] = (0, 0)

    resolution: int = 1

    @classmethod
    def create(
        cls,
        reader: LineReader,
        config: InterpreterConfig | None = None,
        variables: VariableStore | None = None,
    ) -> InterpreterContext:
        """Wire up a fresh context reading from ``reader``."""
        config = config or InterpreterConfig()
        if variables is None:
            variables = VariableStore.seeded(config.creator, config.title)
        errors = ErrorChannel(config.max_errors)
        source = InputStack(reader, errors, variables, config)
        errors.source = source
        env = EnvironmentStack()
        return cls(
            config=config,
            errors=errors,
            source=source,
            scanner=Scanner(source, errors, env, config.word_size),
            env=env,
            variables=variables,
            resolution=config.resolution,
        )

    def find_label(self, name: str) -> Item | None:
        """Item bound to ``name``. ``last`` means the base item unless it is a real label."""
        item = self.labels.find(name)
        if item is None and name == LAST and not self.labels.is_bound(LAST):
            return self.base_item
        return item

    def place(self, item: Item) -> None:
        """Append a drawing item, make it the base item and bind pending labels to it."""
        self.scene.append(item)
        self.base_item = item
        self.labels.bind_pending(item)

    def add_text(self, item: Item) -> None:
        """Append an item that never becomes the base item and takes no labels."""
        self.scene.append(item)
