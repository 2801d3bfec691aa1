#!/usr/bin/env python3
from dropblog.cli import main

if __name__ == "__main__":
    main()
