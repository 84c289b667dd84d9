"""Entry point for `python -m svgpolicy` and `svgpolicy` CLI."""

from svgpolicy.cli.app import app


def main() -> None:
    app()


if __name__ == "__main__":
    main()
