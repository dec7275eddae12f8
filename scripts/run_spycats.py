#!/usr/bin/env python3
"""
Spy Cat Agency console.
Entrypoint - loads .env, validates configuration and launches the TUI.
"""

import sys
from pathlib import Path

# Load environment variables from .env file first
import dotenv
dotenv.load_dotenv()

# Add project root to path for imports (spycats/, tui/ and util/ are all in project root)
sys.path.insert(0, str(Path(__file__).parent.parent))

def main():
    """Console entrypoint - validates configuration and launches the spy cat screen."""
    try:
        from spycats.core.config import validate_config
        settings = validate_config()
        if isinstance(settings, str):
            print(f"❌ {settings}")
            print("   Set SPY_CATS_API_URL to the backend base URL, e.g. http://localhost:8000")
            return 1

        try:
            from tui.main import main as tui_main
            tui_main()
        except ImportError as e:
            print(f"❌ Failed to import spy cat console: {e}")
            print("   Make sure textual is installed: pip install textual")
            return 1

    except KeyboardInterrupt:
        print("\nℹ️  Console interrupted")
        return 0
    except Exception as e:
        print(f"❌ Console startup failed: {e}")
        return 1

    return 0

if __name__ == "__main__":
    sys.exit(main())
