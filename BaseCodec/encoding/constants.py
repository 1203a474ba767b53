"""
RFC 4648 alphabets.
"""

BASE64_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
BASE64_URL_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
BASE32_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
BASE32_HEX_CHARS = "0123456789ABCDEFGHIJKLMNOPQRSTUV"
BASE16_CHARS = "0123456789ABCDEF"

DEFAULT_PAD_CHAR = "="
