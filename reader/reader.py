from abc import ABC, abstractmethod
from typing import TextIO, Optional


class Reader(ABC):
    @abstractmethod
    def read(self, stream: TextIO) -> str:
        ...

    @staticmethod
    def read_from_stream(stream: TextIO, prompt: Optional[str] = None, output: Optional[TextIO] = None) -> str:
        if prompt is not None and output is not None:
            output.write(prompt)
            output.flush()

        from .implementation.line_reader import LineReader
        return LineReader().read(stream)
