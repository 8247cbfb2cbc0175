"""
Hex listing to flash image converter.

Decodes a hex listing, writes the bytes to a new binary file, checks the
written size against the token count, then zero-pads the file to the
flash size.
"""

from pathlib import Path

from .constants import FLASH_SIZE, PAD_BYTE
from ..formats.hex_utils import parse_hex_tokens, tokenize_hex_text


class HexToBinError(Exception):
    """Base class for conversion failures."""

    pass


class DestinationExists(HexToBinError):
    """Raised when the output file is already present."""

    pass


class CountRetrievalFailed(HexToBinError):
    """Raised when the size of the output file cannot be determined."""

    pass


class ByteCountMismatch(HexToBinError):
    """Raised when the bytes written do not match the tokens decoded."""

    def __init__(self, input_tokens: int, output_bytes: int):
        self.input_tokens = input_tokens
        self.output_bytes = output_bytes
        super().__init__(
            f"Byte count mismatch: {input_tokens} input tokens, "
            f"{output_bytes} output bytes"
        )


class PaddingFailed(HexToBinError):
    """Raised when the padded image is not exactly the flash size."""

    pass


class InputTooLarge(PaddingFailed):
    """Raised when decoded data does not fit in the flash."""

    def __init__(self, size: int, final_size: int):
        self.size = size
        self.final_size = final_size
        super().__init__(
            f"Image too large: {size:,} bytes exceeds flash size of {final_size:,} bytes"
        )


class HexToBinConverter:
    """
    Converts a hex listing into a fixed-size flash image.

    The output file is created once and only ever appended to: first the
    decoded bytes, then the zero padding. On failure the partial file is
    left on disk.
    """

    def __init__(self, hex_path, bin_path, final_size: int = FLASH_SIZE):
        """
        Args:
            hex_path: Input hex listing (read-only)
            bin_path: Output image path (must not exist)
            final_size: Size of the padded image in bytes

        Raises:
            ValueError: If final_size is not positive
        """
        if final_size <= 0:
            raise ValueError(f"Flash size must be positive, got {final_size}")

        self.hex_path = Path(hex_path)
        self.bin_path = Path(bin_path)
        self.final_size = final_size
        self.input_tokens = 0

    def check_destination(self) -> None:
        """Refuse to run when the output path is taken."""
        if self.bin_path.exists():
            raise DestinationExists(f"Output file already exists: {self.bin_path}")

    def load(self) -> bytes:
        """
        Read and decode the hex listing.

        Latin-1 maps every byte to a character, so binary junk in the
        input surfaces as a malformed token rather than a decode error.

        Returns:
            Decoded image bytes

        Raises:
            MalformedHexToken: If any token is not two hex digits
            InputTooLarge: If the image does not fit in the flash
        """
        text = self.hex_path.read_text(encoding="latin-1")
        tokens = tokenize_hex_text(text)
        data = parse_hex_tokens(tokens)
        self.input_tokens = len(tokens)

        if len(data) > self.final_size:
            raise InputTooLarge(len(data), self.final_size)

        return data

    def write_bytes(self, data: bytes) -> None:
        """Create the output file and write the image bytes to it."""
        try:
            with open(self.bin_path, "xb") as f:
                f.write(data)
        except FileExistsError:
            raise DestinationExists(
                f"Output file already exists: {self.bin_path}"
            ) from None

    def output_size(self) -> int:
        """Current size of the output file in bytes."""
        try:
            return self.bin_path.stat().st_size
        except OSError as e:
            raise CountRetrievalFailed(
                f"Cannot read size of {self.bin_path}: {e}"
            ) from e

    def decode_and_write(self) -> int:
        """
        Decode the listing and write it to a new output file.

        Returns:
            Number of input tokens
        """
        self.check_destination()
        data = self.load()
        self.write_bytes(data)
        return self.input_tokens

    def verify_counts(self) -> int:
        """
        Compare input tokens with bytes on disk.

        Returns:
            Number of bytes written

        Raises:
            ByteCountMismatch: If the counts differ
        """
        output_bytes = self.output_size()

        print(f"Input tokens: {self.input_tokens:,}")
        print(f"Output bytes: {output_bytes:,}")

        if output_bytes != self.input_tokens:
            raise ByteCountMismatch(self.input_tokens, output_bytes)

        print("Byte counts match")
        return output_bytes

    def pad(self) -> int:
        """
        Append fill bytes up to the flash size.

        Returns:
            Number of bytes appended

        Raises:
            InputTooLarge: If the file is already larger than the flash
        """
        size = self.output_size()
        if size > self.final_size:
            raise InputTooLarge(size, self.final_size)

        padding = self.final_size - size
        if padding:
            with open(self.bin_path, "ab") as f:
                f.write(bytes([PAD_BYTE]) * padding)
        return padding

    def verify_final_size(self) -> int:
        """Check the padded image is exactly the flash size."""
        size = self.output_size()
        if size != self.final_size:
            raise PaddingFailed(
                f"Padded image is {size:,} bytes, expected {self.final_size:,}"
            )

        print(f"Padded to {size:,} bytes: OK")
        return size

    def convert(self) -> dict:
        """
        Run the full conversion.

        Returns:
            Dictionary with conversion statistics

        Raises:
            HexToBinError: On any failed step
        """
        input_tokens = self.decode_and_write()
        output_bytes = self.verify_counts()
        padding = self.pad()
        final_size = self.verify_final_size()

        return {
            "input_tokens": input_tokens,
            "output_bytes": output_bytes,
            "padding_bytes": padding,
            "final_size": final_size,
        }
