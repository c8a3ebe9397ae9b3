#!/usr/bin/env python3
from archivegen.cli import main

if __name__ == "__main__":
    main()
