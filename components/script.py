"""
Script Module - Third-party script declarations

Views declare external scripts here instead of writing <script> tags by hand.
The layout emits each declaration through static/js/script-loader.js, which
decides when the resource is fetched:

- beforeInteractive: emitted in <head>, injected as soon as it is parsed
- afterInteractive:  emitted at the end of <body>, injected right away
- lazyOnload:        emitted at the end of <body>, injected after the window
                     load event once the browser is idle

A failed load is a silent no-op unless ``on_error`` is given.
"""

from typing import Dict, Iterator, List, Optional

from flask import current_app

BEFORE_INTERACTIVE = 'beforeInteractive'
AFTER_INTERACTIVE = 'afterInteractive'
LAZY_ONLOAD = 'lazyOnload'

STRATEGIES = (BEFORE_INTERACTIVE, AFTER_INTERACTIVE, LAZY_ONLOAD)


class Script:
    """
    Declaration of one external script resource

    Args:
        src: Absolute or site-relative URL of the script
        strategy: One of STRATEGIES
        on_load: JavaScript statements run once after a successful load
        on_error: JavaScript statements run if the load fails
        id: Optional identity used for de-duplication instead of src
    """

    __slots__ = ('src', 'strategy', 'on_load', 'on_error', 'id')

    def __init__(self, src: str, strategy: str = AFTER_INTERACTIVE,
                 on_load: Optional[str] = None, on_error: Optional[str] = None,
                 id: Optional[str] = None):
        if not src:
            raise ValueError('Script src must be a non-empty URL')
        if strategy not in STRATEGIES:
            raise ValueError(
                f'Unknown script strategy {strategy!r}; expected one of {", ".join(STRATEGIES)}')
        self.src = src
        self.strategy = strategy
        self.on_load = on_load
        self.on_error = on_error
        self.id = id

    @property
    def key(self) -> str:
        return self.id or self.src

    def loader_options(self) -> Dict[str, str]:
        """Options object passed to loadScript() in the browser"""
        options = {'src': self.src, 'strategy': self.strategy}
        if self.id:
            options['id'] = self.id
        return options

    def __repr__(self):
        return f'<Script {self.src!r} strategy={self.strategy!r}>'


class ScriptRegistry:
    """Scripts declared during one render, unique by id or src"""

    def __init__(self, scripts=()):
        self._scripts: Dict[str, Script] = {}
        for script in scripts:
            self.declare(script)

    def declare(self, script: Script) -> bool:
        """
        Register a script for this render

        Returns:
            bool: False when a script with the same id/src was already declared
        """
        if script.key in self._scripts:
            current_app.logger.debug(f'Skipping duplicate script declaration: {script.key}')
            return False
        self._scripts[script.key] = script
        return True

    def for_strategy(self, strategy: str) -> List[Script]:
        return [s for s in self._scripts.values() if s.strategy == strategy]

    def __iter__(self) -> Iterator[Script]:
        return iter(self._scripts.values())

    def __len__(self):
        return len(self._scripts)

