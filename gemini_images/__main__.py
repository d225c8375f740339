import sys

from gemini_images.cli import main

if __name__ == "__main__":
    sys.exit(main())
