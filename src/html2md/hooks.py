"""Post-conversion hook system.

Hooks rewrite the finished Markdown without coupling the converter to
any particular transformation (stripping boilerplate, adding front
matter, ...).

Three invocation mechanisms:
1. Python API: ``run_hooks([MyHook()], markdown, source)``
2. CLI ``--hook`` flag: ``html2md page.html --hook ./my_hook.py``
3. Config file ``.html2md.toml`` in CWD
"""

from __future__ import annotations

import importlib.util
import sys
from dataclasses import dataclass
from fnmatch import fnmatch
from pathlib import Path
from typing import Protocol, runtime_checkable

from .config import read_config


@dataclass
class HookResult:
    """Result returned by a post-conversion hook."""

    success: bool
    markdown: str = ""
    error: str | None = None


@runtime_checkable
class PostConversionHook(Protocol):
    """Hook that runs after a document has been converted."""

    def should_run(self, markdown: str, source: str) -> bool:
        """Return True if this hook should process the converted document."""
        ...

    def run(self, markdown: str, source: str) -> HookResult:
        """Return the rewritten Markdown."""
        ...


def load_hook_from_script(script_path: str | Path) -> PostConversionHook:
    """Load a PostConversionHook from a Python script.

    The script must define a ``hook()`` factory function that returns
    a ``PostConversionHook`` instance.

    Raises:
        FileNotFoundError: If the script doesn't exist.
        ValueError: If the script doesn't define a ``hook()`` function.
        TypeError: If ``hook()`` returns something that is not a hook.
    """
    path = Path(script_path).resolve()
    if not path.exists():
        raise FileNotFoundError(f"Hook script not found: {path}")

    spec = importlib.util.spec_from_file_location(f"_hook_{path.stem}", path)
    if spec is None or spec.loader is None:
        raise ValueError(f"Cannot load hook script: {path}")

    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    factory = getattr(module, "hook", None)
    if factory is None:
        raise ValueError(
            f"Hook script {path.name} must define a hook() factory function"
        )

    instance = factory()
    if not isinstance(instance, PostConversionHook):
        raise TypeError(
            f"hook() in {path.name} must return a PostConversionHook "
            f"(got {type(instance).__name__})"
        )
    return instance


def load_hooks_from_config(config_path: str | Path | None = None) -> list[PostConversionHook]:
    """Load hooks from the ``[[hooks]]`` tables of ``.html2md.toml``.

    Config format::

        [[hooks]]
        script = "./scripts/my_hook.py"
        sources = ["docs/*.html"]  # optional filter

    Script paths are resolved against the config file's directory.
    """
    if config_path is None:
        config_path = Path.cwd() / ".html2md.toml"
    else:
        config_path = Path(config_path)

    config = read_config(config_path)

    hooks: list[PostConversionHook] = []
    for hook_cfg in config.get("hooks", []):
        script = hook_cfg.get("script")
        if not script:
            continue

        script_path = config_path.parent / script
        try:
            hook = load_hook_from_script(script_path)
            sources = hook_cfg.get("sources")
            if sources:
                hook = _FilteredHook(hook, sources)
            hooks.append(hook)
        except (FileNotFoundError, ValueError, TypeError) as e:
            print(f"Warning: Failed to load hook {script}: {e}", file=sys.stderr)

    return hooks


class _FilteredHook:
    """Wrapper that only runs a hook for sources matching glob patterns."""

    def __init__(self, inner: PostConversionHook, patterns: list[str]) -> None:
        self._inner = inner
        self._patterns = list(patterns)

    def should_run(self, markdown: str, source: str) -> bool:
        if not any(fnmatch(source, pattern) for pattern in self._patterns):
            return False
        return self._inner.should_run(markdown, source)

    def run(self, markdown: str, source: str) -> HookResult:
        return self._inner.run(markdown, source)


def run_hooks(
    hooks: list[PostConversionHook],
    markdown: str,
    source: str,
) -> tuple[str, list[HookResult]]:
    """Apply all applicable hooks in order.

    Each successful hook's output is the next hook's input; a failing
    hook leaves the Markdown unchanged.

    Returns:
        The final Markdown and the HookResult of every hook that ran.
    """
    results: list[HookResult] = []
    for hook in hooks:
        try:
            if hook.should_run(markdown, source):
                result = hook.run(markdown, source)
                results.append(result)
                if result.success:
                    markdown = result.markdown
                else:
                    print(
                        f"  [Hook] {type(hook).__name__} failed: {result.error}",
                        file=sys.stderr,
                    )
        except Exception as e:
            print(f"  [Hook] {type(hook).__name__} error: {e}", file=sys.stderr)
            results.append(HookResult(success=False, markdown=markdown, error=str(e)))
    return markdown, results
