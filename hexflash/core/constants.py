"""
Flash image constants.

Geometry of the target flash device and the fill value used when an
image is shorter than the device.
"""

# Flash layout
FLASH_SIZE = 0x20000  # 128KB, 131072 bytes
PAD_BYTE = 0x00
