"""
Entry point for maze_walker CLI
"""
import sys

from walk import main

if __name__ == '__main__':
    sys.exit(main())
