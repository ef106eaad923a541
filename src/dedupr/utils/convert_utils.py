"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
"""


class ConvertUtils:
    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """
        Convert bytes to human-readable string (e.g., 1.50KB, 3.20MB).
        """
        if size_bytes < 0:
            return "0B"

        units = ["B", "KB", "MB", "GB", "TB", "PB"]
        for unit in units:
            if size_bytes < 1024:
                return f"{size_bytes:.2f}{unit}"
            size_bytes /= 1024
        return f"{size_bytes:.2f}EB"

    @staticmethod
    def human_to_kilobytes(size_str: str) -> int:
        """
        Convert a hash sample size to kilobytes.
        A bare number is already in KB ('2048'); a unit suffix is honoured ('4M', '1GB', '512KB').
        Raises ValueError for negative sizes, sizes below 1 KB or invalid formats.
        """
        size_str = str(size_str).strip().upper()

        units = {
            'GB': 1024 ** 2, 'G': 1024 ** 2,
            'MB': 1024, 'M': 1024,
            'KB': 1, 'K': 1,
        }

        # Longest first so 'KB' is not read as 'K' + 'B'
        for unit in sorted(units.keys(), key=len, reverse=True):
            if size_str.endswith(unit):
                value_str = size_str[:-len(unit)].strip()
                try:
                    value = float(value_str)
                except ValueError:
                    raise ValueError(f"Invalid numeric value in size: '{value_str}'")

                if value < 0:
                    raise ValueError(f"Negative size not allowed: '{size_str}'")
                kilobytes = int(value * units[unit])
                if value > 0 and kilobytes == 0:
                    raise ValueError(f"Size must be at least 1 KB: '{size_str}'")
                return kilobytes

        try:
            value = int(size_str)
        except ValueError:
            raise ValueError(
                f"Invalid size format: '{size_str}'. "
                f"Supported formats: 2048, 512K, 4M, 1G"
            )

        if value < 0:
            raise ValueError(f"Negative size not allowed: '{size_str}'")
        return value
