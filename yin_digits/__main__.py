"""Package entry point for ``python -m yin_digits``.

WHY: Users pipe numbers through the converter as
``echo 2048 | python -m yin_digits``. Python's ``-m`` flag looks for
``__main__.py`` inside the package and executes it.

HOW: Delegates to the CLI's main() function.
"""

from yin_digits.cli import main

if __name__ == "__main__":
    main()
