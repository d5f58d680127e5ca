"""Script parser front end: text or file in, Script out."""

from __future__ import annotations

from pathlib import Path

from scriptpress.config import get_logger
from scriptpress.exceptions import ParseError, ScriptPressFileNotFoundError
from scriptpress.parser.builder import parse_script
from scriptpress.parser.models import Script

logger = get_logger(__name__)


class ScriptParser:
    """Parse screenplay markup with a frontmatter block into a Script.

    Parsing is a pure function of the text; the parser holds no state
    between calls and may be shared freely.
    """

    def parse(self, content: str) -> Script:
        """Parse script content.

        Args:
            content: Full text, frontmatter included

        Returns:
            Freshly built Script
        """
        script = parse_script(content)
        logger.debug(
            "Parsed script",
            title=script.title,
            scenes=len(script.scenes),
            numbered_scenes=len(script.numbered_scenes),
        )
        return script

    def parse_file(self, file_path: Path | str) -> Script:
        """Read and parse a script file.

        Args:
            file_path: Path to a UTF-8 script file

        Returns:
            Parsed Script

        Raises:
            ScriptPressFileNotFoundError: If the file does not exist
            ParseError: If the file is not valid UTF-8 text
        """
        path = Path(file_path)
        if not path.is_file():
            raise ScriptPressFileNotFoundError(
                message=f"File not found: {path}",
                hint="Check the path to the script file.",
                details={"file": str(path), "current_dir": str(Path.cwd())},
            )

        try:
            content = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            logger.error("Script file is not UTF-8 text", file=str(path))
            raise ParseError(
                message=f"Failed to read script file: {path}",
                hint="Save the script as UTF-8 plain text.",
                details={"file": str(path), "decode_error": str(e)},
            ) from e

        logger.debug("Parsing script file", file=str(path))
        return self.parse(content)
