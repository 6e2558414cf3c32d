"""Static site builder.

Pages are Markdown files under ``page_dir``; each one is compiled into a
Jinja2 child template extending a layout from ``template_dir`` and rendered
into ``output_dir``:

    pages/index.md        -> public/index.html
    pages/notes/vowels.md -> public/notes/vowels/index.html

Files under ``asset_dir`` are copied verbatim to ``public/assets/``.
"""
from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, Optional, Set, Tuple

from jinja2 import (
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateRuntimeError,
)

from lingssg.core.config import SiteConfig
from lingssg.core.exceptions import LingSsgError
from lingssg.core.functions import Function, FunctionRegistry, InvokeError, format_invoke_error, invoke_function
from lingssg.core.markdown import CompileError, Page, compile_page

logger = logging.getLogger(__name__)

ASSETS_OUTPUT_DIR = "assets"
INDEX_STEM = "index"


class BuildError(LingSsgError):
    """A build step failed on ``path``; the underlying error is ``__cause__``."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(f"Error in {path}", context={"path": str(path)})
        self.path = Path(path)


def _iter_files(root: Path) -> Iterator[Tuple[Path, Path]]:
    """Yield ``(logical_path, real_path)`` for every file below ``root``.

    Symbolic links are followed once; a directory reached twice through
    links is not walked again.
    """
    directories: List[Tuple[Path, Path]] = [(root, root)]
    visited: Set[Path] = set()
    while directories:
        logical_dir, real_dir = directories.pop()
        try:
            resolved_dir = real_dir.resolve()
            if resolved_dir in visited:
                continue
            visited.add(resolved_dir)
            entries = sorted(os.scandir(real_dir), key=lambda e: e.name)
        except OSError as err:
            raise BuildError(logical_dir) from err
        for entry in entries:
            logical = logical_dir / entry.name
            real = Path(entry.path)
            try:
                if entry.is_symlink():
                    real = real.resolve(strict=True)
                if real.is_dir():
                    directories.append((logical, real))
                elif real.is_file():
                    yield logical, real
            except OSError as err:
                raise BuildError(logical) from err


def page_template_name(relative: Path) -> str:
    """Template name (and output path) of a page, relative to the page dir."""
    if relative.stem.lower() == INDEX_STEM:
        target = relative.with_suffix(".html")
    else:
        target = relative.parent / relative.stem / "index.html"
    return target.as_posix()


class LinSsg:
    """Site generator over a Jinja2 environment.

    Example:
        ssg = LinSsg(SiteConfig.from_config(ConfigManager(root)))
        ssg.register_symbol("Phonemic")
        ssg.register_function("transc", TranscFunction())
        ssg.build()
    """

    def __init__(self, config: SiteConfig) -> None:
        self.config = config
        self.base_context: Dict[str, Any] = {}
        self._registry = FunctionRegistry()
        self._page_templates: Dict[str, str] = {}
        self._pages: Dict[str, Dict[str, Any]] = {}
        self.env = Environment(
            loader=ChoiceLoader(
                [DictLoader(self._page_templates), FileSystemLoader(str(config.template_dir))]
            ),
            undefined=StrictUndefined,
            autoescape=False,
        )

    # ========== Registration ==========

    def register_const(self, name: str, value: Any) -> None:
        self.base_context[name] = value

    def register_symbol(self, name: str) -> None:
        """Register a constant whose value is its own name."""
        self.register_const(name, name)

    def register_function(self, name: str, function: Function[Any]) -> None:
        """Expose ``function`` to templates as ``name(key=value, ...)``."""
        self._registry.add(name, function)
        self.env.globals[name] = self._make_global(name, function)

    def _make_global(self, name: str, function: Function[Any]) -> Callable[..., Any]:
        def call(**kwargs: Any) -> Any:
            try:
                return invoke_function(name, function, kwargs)
            except InvokeError as err:
                raise TemplateRuntimeError(format_invoke_error(name, kwargs, err)) from err

        call.__name__ = name
        return call

    def doc(self, name: str) -> Optional[str]:
        function = self._registry.get(name)
        return function.doc() if function is not None else None

    def functions(self) -> List[str]:
        return self._registry.list_functions()

    # ========== Build ==========

    def build(self) -> None:
        """Rebuild the whole output directory.

        Raises:
            BuildError: on the first failing path
        """
        self._prepare_output()
        self._convert_pages()
        self._write_pages()
        self._copy_assets()
        logger.debug("Built %d pages into %s", len(self._pages), self.config.output_dir)

    def _prepare_output(self) -> None:
        output_dir = self.config.output_dir
        try:
            if output_dir.exists():
                shutil.rmtree(output_dir)
            output_dir.mkdir(parents=True)
        except OSError as err:
            raise BuildError(output_dir) from err

    def _convert_pages(self) -> None:
        self._page_templates.clear()
        self._pages.clear()
        for logical, real in _iter_files(self.config.page_dir):
            self._add_page(logical, real)

    def _add_page(self, logical: Path, real: Path) -> None:
        try:
            page: Page = compile_page(real.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, CompileError) as err:
            raise BuildError(logical) from err
        name = page_template_name(logical.relative_to(self.config.page_dir))
        if name in self._page_templates:
            raise BuildError(logical) from FileExistsError(f"Another page already renders to {name}")
        self._page_templates[name] = page.template
        self._pages[name] = page.base_context

    def _write_pages(self) -> None:
        for name, page_context in self._pages.items():
            output_path = self.config.output_dir / name
            context = {**self.base_context, **page_context}
            try:
                output_path.parent.mkdir(parents=True, exist_ok=True)
                rendered = self.env.get_template(name).render(context)
                with output_path.open("x", encoding="utf-8") as fh:
                    fh.write(rendered)
            except (OSError, TemplateError) as err:
                raise BuildError(output_path) from err
            logger.debug("Wrote page %s", output_path)

    def _copy_assets(self) -> None:
        asset_dir = self.config.asset_dir
        if not asset_dir.is_dir():
            return
        target_root = self.config.output_dir / ASSETS_OUTPUT_DIR
        for logical, real in _iter_files(asset_dir):
            target = target_root / logical.relative_to(asset_dir)
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                with real.open("rb") as src, target.open("xb") as dst:
                    shutil.copyfileobj(src, dst)
            except OSError as err:
                raise BuildError(target) from err
            logger.debug("Copied asset %s", target)


__all__ = ["LinSsg", "BuildError", "SiteConfig", "page_template_name"]
