"""
Shell Session

Line-oriented request/response loop that feeds the converter.

Protocol:
    startup   the ready marker is written to the flag file
    request   three lines: input path, encoding, output path
    reply     ``OK`` when the outline was written, ``KO`` otherwise
    end       a request line equal to the end command, or end of input

Requests are handled strictly one at a time and replies are flushed in
request order. A failed request never ends the session.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from codegraph_outline.config import Settings, get_settings
from codegraph_outline.converter import OutlineConverter
from codegraph_outline.errors import FileConversionError, OutputWriteError
from codegraph_outline.logging import get_logger, request_context

logger = get_logger(__name__)

REPLY_OK = "OK"
REPLY_FAILED = "KO"


@dataclass(frozen=True)
class ConversionRequest:
    input_path: str
    encoding: str
    output_path: str


class ShellSession:
    """Serves conversion requests read from ``stdin`` until told to stop."""

    def __init__(
        self,
        converter: OutlineConverter,
        stdin: TextIO,
        stdout: TextIO,
        settings: Settings | None = None,
    ):
        self.converter = converter
        self.stdin = stdin
        self.stdout = stdout
        self.settings = settings or get_settings()

    def announce_ready(self, flag_file: str | Path) -> None:
        """
        Signal readiness by writing the ready marker to ``flag_file``.

        Raises:
            OutputWriteError: If the flag file cannot be written
        """
        try:
            Path(flag_file).write_text(self.settings.ready_marker, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(f"Cannot write flag file {flag_file}: {e.strerror or e}") from e
        logger.info("session_ready", flag_file=str(flag_file))

    def read_request(self) -> ConversionRequest | None:
        """Read the next request, or None when the session is over."""
        input_line = self.stdin.readline()
        if not input_line:
            return None

        input_path = input_line.strip()
        if input_path == self.settings.end_command:
            return None

        encoding_line = self.stdin.readline()
        output_line = self.stdin.readline()
        if not output_line:
            logger.warning("truncated_request", input=input_path)
            return None

        return ConversionRequest(
            input_path=input_path,
            encoding=encoding_line.strip() or "utf-8",
            output_path=output_line.strip(),
        )

    def handle(self, request: ConversionRequest) -> bool:
        """Run one conversion; whole-file failures (already logged by the converter) are reported as False."""
        try:
            self.converter.convert_file(request.input_path, request.output_path, encoding=request.encoding)
        except FileConversionError:
            return False
        return True

    def reply(self, ok: bool) -> None:
        self.stdout.write((REPLY_OK if ok else REPLY_FAILED) + "\n")
        self.stdout.flush()

    def run(self) -> int:
        """
        Serve requests until the end command or end of input.

        Returns:
            Number of requests served
        """
        served = 0
        while True:
            request = self.read_request()
            if request is None:
                break

            served += 1
            with request_context(served):
                logger.debug("request_received", input=request.input_path, output=request.output_path)
                self.reply(self.handle(request))

        logger.info("session_done", served=served)
        return served
