"""Ordered frame accumulation and single-shot GIF encoding."""

import io
import logging
import os
import tempfile
from dataclasses import dataclass, field

from PIL import GifImagePlugin, Image

from .errors import OutputError

log = logging.getLogger(__name__)

DELAY_UNIT_MS = 10  # GIF delays are in hundredths of a second


@dataclass
class Animation:
    frames: list[Image.Image] = field(default_factory=list)
    delays: list[int] = field(default_factory=list)  # hundredths of a second

    def __len__(self) -> int:
        return len(self.frames)

    def append(self, frame: Image.Image, delay: int = 1) -> None:
        """Add the next frame in sweep order."""
        if frame.mode != "P":
            raise OutputError(f"frame {len(self.frames)} is mode {frame.mode}, expected P")
        if self.frames:
            first = self.frames[0]
            if frame.size != first.size:
                raise OutputError(
                    f"frame {len(self.frames)} is {frame.size}, expected {first.size}")
            if frame.getpalette() != first.getpalette():
                raise OutputError(f"frame {len(self.frames)} does not share the global palette")
        self.frames.append(frame)
        self.delays.append(delay)

    def encode(self) -> bytes:
        """Encode the whole sequence as an animated GIF and return the bytes.

        Every appended frame becomes its own GIF frame, identical neighbors
        included, and all of them use the global color table.
        """
        if not self.frames:
            raise OutputError("no frames to encode")
        buf = io.BytesIO()
        try:
            # getheader may rewrite the palette of the image it is handed
            header, _ = GifImagePlugin.getheader(
                self.frames[0].copy(),
                info={"loop": 0, "duration": self.delays[0] * DELAY_UNIT_MS},
            )
            for chunk in header:
                buf.write(chunk)
            for frame, delay in zip(self.frames, self.delays):
                for chunk in GifImagePlugin.getdata(frame, duration=delay * DELAY_UNIT_MS):
                    buf.write(chunk)
            buf.write(b";")
        except (OSError, ValueError) as exc:
            raise OutputError(f"GIF encoding failed: {exc}") from exc
        return buf.getvalue()

    def save(self, path: str) -> None:
        """Encode in memory, then atomically replace ``path``.

        Nothing is written unless encoding succeeds, and a failed write
        leaves no file behind.
        """
        data = self.encode()
        directory = os.path.dirname(os.path.abspath(path))
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                    "wb", dir=directory, prefix=".globegif-", suffix=".tmp",
                    delete=False) as tmp:
                tmp_name = tmp.name
                tmp.write(data)
            os.chmod(tmp_name, 0o644)
            os.replace(tmp_name, path)
        except OSError as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise OutputError(f"cannot write {path}: {exc}") from exc
        log.info("Wrote %s (%d frames, %d bytes)", path, len(self.frames), len(data))
