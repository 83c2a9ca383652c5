"""Entry point - theme preview and validation via CLI args.

Usage:
    python main.py                          # Preview the configured theme (HUD screen)
    python main.py preview default picker   # Preview a theme on a given screen
    python main.py validate default         # Load, check assets, print a summary
    python main.py dump default             # Print the normalized theme JSON
"""

import sys
import asyncio
import contextlib


def _themes():
    from client.settings import load_settings, themes_dir
    from client.theme_manager import ThemeManager
    settings = load_settings()
    return settings, ThemeManager(themes_dir(settings))


def validate(name: str = None) -> int:
    from shared.errors import ThemeError
    settings, manager = _themes()
    name = name or settings["theme"]
    try:
        theme = manager.load_theme(name)
    except ThemeError as e:
        print(f"[validate] {type(e).__name__}: {e}")
        return 1
    print(f"[validate] Theme '{name}' OK: {len(theme.buttons)} buttons, "
          f"{len(theme.tower_buttons)} tower buttons, {len(theme.text)} text fields, "
          f"{len(theme.decorations)} decorations, {len(theme.asset_references())} assets")
    return 0


def dump(name: str = None) -> int:
    from shared.errors import ThemeError
    from shared.theme_io import dump_theme
    settings, manager = _themes()
    # stdout carries only the JSON document
    with contextlib.redirect_stdout(sys.stderr):
        try:
            theme = manager.load_theme(name or settings["theme"], verify_assets=False)
        except ThemeError as e:
            print(f"[dump] {type(e).__name__}: {e}")
            return 1
    sys.stdout.write(dump_theme(theme))
    return 0


async def preview(name: str = None, screen: str = "hud") -> int:
    try:
        print("[main] importing App")
        from client.app import App
        app = App(theme_name=name, screen_name=screen)
        print("[main] starting run loop")
        await app.run()
        print("[main] run loop ended")
    except Exception:
        import traceback
        print(traceback.format_exc())
        return 1
    return 0


def main() -> int:
    args = sys.argv[1:]

    if not args or args[0] == "preview":
        name = args[1] if len(args) > 1 else None
        screen = args[2] if len(args) > 2 else "hud"
        return asyncio.run(preview(name, screen))
    if args[0] == "validate":
        return validate(args[1] if len(args) > 1 else None)
    if args[0] == "dump":
        return dump(args[1] if len(args) > 1 else None)
    print(__doc__)
    return 1


if __name__ == "__main__":
    sys.exit(main())
