import os
import sys

# Ensure project root is on sys.path so we can import chatbrain.*
CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.append(PROJECT_ROOT)

from chatbrain.gui import run_gui

if __name__ == "__main__":
    run_gui()
