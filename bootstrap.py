#!/usr/bin/env python3
"""
Setup script for the HACK*MATCH bot.
Installs whichever runtime packages are missing and checks that a display
is reachable.
"""

import importlib.util
import os
import subprocess
import sys

# pip name -> import name
PACKAGES = {
    'mss': 'mss',                  # Screen capture
    'Pillow': 'PIL',               # Image handling
    'numpy': 'numpy',              # Pixel matching
    'pyautogui': 'pyautogui',      # Key presses
    'PyGetWindow': 'pygetwindow',  # Finding and focusing the game window
}


def missing_packages(find_spec=importlib.util.find_spec):
    return [pip for pip, mod in PACKAGES.items() if find_spec(mod) is None]


def install_packages():
    """pip-install the missing packages in one go and write requirements.txt."""
    missing = missing_packages()
    if missing:
        print(f"Installing {', '.join(missing)}...")
        cmd = [sys.executable, '-m', 'pip', 'install', '-q', *missing]
        if subprocess.call(cmd) != 0:
            print(f"✗ pip failed. Try manually: pip install {' '.join(missing)}")
            return False
    else:
        print("All Python packages already present.")

    req_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'requirements.txt')
    with open(req_path, 'w', encoding='utf-8') as f:
        f.writelines(f"{pkg}\n" for pkg in PACKAGES)
    print(f"Wrote {req_path}\n")
    return True


def check_display():
    """Check that a screen can be captured."""
    if sys.platform.startswith('linux') and not os.environ.get('DISPLAY'):
        print("✗ DISPLAY is not set -- the bot needs a running X session.")
        return False
    try:
        import mss
        with mss.mss() as sct:
            mon = sct.monitors[0]
        print(f"Screen found: {mon['width']}x{mon['height']}")
        return True
    except Exception as e:
        print(f"✗ Could not capture the screen: {e}")
        return False


def main():
    print("=" * 50)
    print("  HACK*MATCH Bot Setup")
    print("=" * 50)
    print()

    if not install_packages():
        sys.exit(1)
    check_display()

    print()
    print("=" * 50)
    print("  Setup complete! Start HACK*MATCH at 1600x900, then run:")
    print()
    print("    python hackmatch_bot.py                      # play")
    print("    python hackmatch_bot.py --board board.txt    # solve a saved board")
    print("=" * 50)


if __name__ == '__main__':
    main()
