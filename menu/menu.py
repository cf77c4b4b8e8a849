import sys
from enum import IntEnum
from typing import Optional, TextIO
from utils.types import *
from utils.huffman_encoder import count_frequencies
from utils.bit_magic import original_bit_size, compressed_bit_size
from utils.tables import original_bit_dataframe, huffman_code_dataframe, format_table
from utils.tree_printer import render_tree
from encoder import HuffmanTextEncoder

MENU_TEXT = (
    "\nMenu:\n"
    "1. Reduce (Compress)\n"
    "2. See the Huffman Tree\n"
    "3. See the Original Bit Size\n"
    "4. See the Original Bit Table\n"
    "5. See the New Bit Size\n"
    "6. See the New Bit Table\n"
    "0. Exit\n"
)

NO_DATA_MESSAGE = "No data: input text is empty."


class MenuOption(IntEnum):
    EXIT = 0
    COMPRESS = 1
    TREE = 2
    ORIGINAL_SIZE = 3
    ORIGINAL_TABLE = 4
    COMPRESSED_SIZE = 5
    CODE_TABLE = 6


class Menu:
    def __init__(self, text: str, input_stream: Optional[TextIO] = None, output_stream: Optional[TextIO] = None,
                 verbose=False):
        """
        Builds the frequency table, the Huffman tree and the code table of the text once.
        Every menu option only reads them.
        """
        self.text = text
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output_stream = output_stream if output_stream is not None else sys.stdout
        self.verbose = verbose

        self.frequencies: FrequencyTable = count_frequencies(text)
        self.encoder = HuffmanTextEncoder(verbose=verbose, output=self.output_stream)
        self.compressed: Optional[CompressedText] = None
        try:
            self.compressed = self.encoder.encode(text)
        except EmptyInputError:
            if self.verbose:
                print("Menu: empty input, no Huffman tree was built.", file=self.output_stream)
        self.coding: Optional[HuffmanCoding] = self.encoder.coding

    def write(self, text: str = "") -> None:
        self.output_stream.write(text + "\n")

    def read_choice(self) -> Optional[int]:
        """
        Shows the menu and reads one choice.

        Returns:
            int: The entered number, -1 for anything that is not a number, None at end of input.
        """
        self.output_stream.write(MENU_TEXT)
        self.output_stream.write("Enter your choice: ")
        self.output_stream.flush()

        line = self.input_stream.readline()
        if not line:
            return None
        try:
            return int(line.strip())
        except ValueError:
            return -1

    def handle(self, choice: int) -> bool:
        """
        Runs one menu action.

        Returns:
            bool: False when the session should end.
        """
        try:
            option = MenuOption(choice)
        except ValueError:
            self.write("Invalid option. Try again.")
            return True

        if option == MenuOption.EXIT:
            self.write("Exiting...")
            return False

        match option:
            case MenuOption.ORIGINAL_SIZE:
                self.write(f"Original bit size: {original_bit_size(self.text)} bits")
            case MenuOption.ORIGINAL_TABLE:
                self.write("Original Bit Table:")
                self.write(format_table(original_bit_dataframe(self.frequencies)))
            case _ if self.coding is None:
                self.write(NO_DATA_MESSAGE)
            case MenuOption.COMPRESS:
                self.write("Compressed bit string:")
                self.write(self.compressed.bits)
            case MenuOption.TREE:
                self.write("Huffman Tree:")
                self.write(render_tree(self.coding.tree))
            case MenuOption.COMPRESSED_SIZE:
                self.write(f"Compressed bit size: {compressed_bit_size(self.text, self.coding.codes)} bits")
            case MenuOption.CODE_TABLE:
                self.write("Huffman Code Table:")
                self.write(format_table(huffman_code_dataframe(self.coding.frequencies, self.coding.codes)))

        return True

    def run(self) -> None:
        while True:
            choice = self.read_choice()
            if choice is None:
                self.write()
                self.write("Exiting...")
                return
            if not self.handle(choice):
                return
