# main.py
from graph_path.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
