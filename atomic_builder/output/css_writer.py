"""
Serializes a build table into CSS text.
"""

from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from atomic_builder.core.models import BuildSettings
from atomic_builder.observability.logger import get_logger

logger = get_logger(__name__)

START_TOKEN = "__START__"
END_TOKEN = "__END__"


class CssWriter:
    """
    Renders `selector {property: value}` rules, one per line.

    A namespaced build (`{"#atomic": {".Fw-b": {...}}}`) renders its
    selectors as descendants of the namespace: `#atomic .Fw-b {...}`.
    `__START__`/`__END__` in property names and values become the
    configured start/end directions.
    """

    def __init__(self, settings: BuildSettings | None = None):
        self.settings = settings or BuildSettings()

    def _directional(self, text: str) -> str:
        return text.replace(START_TOKEN, self.settings.start).replace(END_TOKEN, self.settings.end)

    def iter_rules(self, build: Mapping[str, Any], scope: str = "") -> Iterator[tuple[str, dict[str, str]]]:
        """
        Yield `(selector, declarations)` pairs, flattening namespaces.

        Empty blocks render nothing, so a flushed namespaced build is empty.
        """
        for key, block in build.items():
            if not block:
                continue
            selector = f"{scope} {key}".strip()
            if all(isinstance(v, Mapping) for v in block.values()):
                yield from self.iter_rules(block, selector)
            else:
                yield selector, {
                    self._directional(prop): self._directional(str(value))
                    for prop, value in block.items()
                }

    def render(self, build: Mapping[str, Any]) -> str:
        lines = []
        for selector, declarations in self.iter_rules(build):
            body = "; ".join(f"{prop}: {value}" for prop, value in declarations.items())
            lines.append(f"{selector} {{{body}}}")
        return "\n".join(lines) + "\n" if lines else ""

    def write(self, build: Mapping[str, Any], output_path: str | Path) -> Path:
        """
        Render the build and write it to `output_path`.

        Returns:
            The path written
        """
        path = Path(output_path)
        css = self.render(build)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(css, encoding="utf-8")
        logger.info(f"Wrote {css.count(chr(10))} CSS rules -> {path}")
        return path
