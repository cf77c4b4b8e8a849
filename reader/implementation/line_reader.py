from typing import TextIO
from ..reader import Reader


class LineReader(Reader):
    def __init__(self):
        pass

    def read(self, stream: TextIO) -> str:
        line = stream.readline()

        # End of stream reads as an empty text
        return line.rstrip("\r\n")
