# snapcanvas.py

import argparse
import logging

from constants import SHAPE_TYPES, CANVAS_WIDTH, CANVAS_HEIGHT
from renderer import SceneRenderer
from utils.log import setup_logging

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Grid-snapping diagram canvas')
    parser.add_argument('-t', '--tool', choices=SHAPE_TYPES, help='Placement tool active at start')
    parser.add_argument('-l', '--log-level', default='INFO', dest='log_level',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], help='Logging level')
    parser.add_argument('--log-dir', dest='log_dir', help='Also write snapcanvas.log into this directory')
    parser.add_argument('-s', '--snapshot', dest='snapshot', metavar='OUT.png',
                        help='Save an image of the canvas when the window closes')
    parser.add_argument('-d', '--diagnostics', dest='diagnostics', metavar='OUT.csv',
                        help='Write the shape diagnostics table as CSV when the window closes')
    return parser


def save_session(controller, snapshot=None, diagnostics=None,
                 width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT):
    """Writes the requested session outputs: a PNG of the scene and the diagnostics table as CSV."""
    frame = controller.diagnostics.to_frame()
    log.debug("Session diagnostics:\n%s", frame.to_string() if not frame.empty else "(none)")

    if snapshot:
        renderer = SceneRenderer(controller.model, controller.viewport, controller.selection)
        renderer.render_image(width, height).save(snapshot)
        log.info("Saved snapshot to %s", snapshot)
    if diagnostics:
        frame.to_csv(diagnostics, index=False)
        log.info("Wrote %d diagnostic records to %s", len(frame), diagnostics)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_dir)

    # Tk is imported late so the engine modules stay usable without a display
    import tkinter as tk
    from controller import DrawingApp
    from view import DrawingView

    root = tk.Tk()
    controller = DrawingApp()
    view = DrawingView(root, controller)
    if args.tool:
        controller.select_tool(args.tool)

    log.info("snapcanvas started")
    view.refresh_all()
    root.mainloop()
    save_session(controller, args.snapshot, args.diagnostics)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
