# main.py
from magic_cube.__main__ import main

if __name__ == "__main__":
    main()
