import argparse
import asyncio
import logging
import sys

import uvicorn

from jobboard.config.settings import settings

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)


def serve(args: argparse.Namespace) -> int:
    """
    Run the HTTP API.
    """
    uvicorn.run("jobboard.api.app:app", host=args.host, port=args.port, log_config=None)
    return 0


async def render(args: argparse.Namespace) -> int:
    """
    Render a single URL to a PDF file without starting the server.
    """
    from jobboard.browser.manager import BrowserManager
    from jobboard.render.pipeline import RenderError
    from jobboard.render.service import render_to_file

    try:
        job = await render_to_file(args.url, output_path=args.output, selector=args.selector)
    except RenderError as e:
        print(f"Render failed: {e}", file=sys.stderr)
        return 1
    finally:
        await BrowserManager.close()

    if not job.succeeded:
        print(f"Render failed: {job.error}", file=sys.stderr)
        return 1
    print(f"Saved {args.url} ({len(job.pdf or b'')} bytes, {job.elapsed:.2f}s)")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(prog="jobboard", description="Job board API and URL-to-PDF renderer")
    subparsers = parser.add_subparsers(dest="command")

    srv = subparsers.add_parser("serve", help="Serve the GraphQL API and render form")
    srv.add_argument("--host", default=settings.HOST)
    srv.add_argument("--port", type=int, default=settings.PORT)

    ren = subparsers.add_parser("render", help="Render one URL to PDF")
    ren.add_argument("url", help="Page to render")
    ren.add_argument("--output", default=str(settings.OUTPUT_PATH), help="Output PDF path")
    ren.add_argument("--selector", default=settings.READY_SELECTOR, help="Readiness selector")

    args = parser.parse_args()

    if args.command == "render":
        return asyncio.run(render(args))
    if args.command is None:
        args = parser.parse_args(["serve"])
    return serve(args)


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pass
