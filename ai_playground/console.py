"""Terminal I/O used by the playground components and menu loop."""
import sys
from typing import Optional, TextIO


class Console:
    """Thin wrapper around a pair of text streams.

    Everything the playground shows or reads goes through here, so tests can
    swap in in-memory streams.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> TextIO:
        return self._stdin or sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    def write(self, text: str = "") -> None:
        """Write one line of text.

        Characters the output encoding cannot represent are replaced.
        """
        line = f"{text}\n"
        try:
            self.stdout.write(line)
        except UnicodeEncodeError:
            encoding = getattr(self.stdout, "encoding", None) or "utf-8"
            self.stdout.write(line.encode(encoding, errors="replace").decode(encoding))
        self.stdout.flush()

    def read_line(self, prompt: str = "") -> str:
        """Show ``prompt`` and read one line without its line terminator.

        Byte streams are decoded here with undecodable bytes replaced, so a
        stray byte gives a garbled line rather than an error.

        Raises:
            EOFError: If the input stream is exhausted
        """
        if prompt:
            self.stdout.write(prompt)
            self.stdout.flush()

        stream = self.stdin
        raw = getattr(stream, "buffer", None)
        if raw is not None:
            encoding = getattr(stream, "encoding", None) or "utf-8"
            line = raw.readline().decode(encoding, errors="replace")
        else:
            line = stream.readline()

        if not line:
            raise EOFError("End of input")
        return line.rstrip("\r\n")
