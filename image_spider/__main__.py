"""
Allows running the spider as: python -m image_spider
"""

import sys

from image_spider.cli import main

if __name__ == "__main__":
    sys.exit(main())
