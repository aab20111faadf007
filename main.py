#!/usr/bin/env python3
"""
Document Intelligence Service - Main Entry Point.

Serves the invoice analysis API, or analyzes a single local document
from the command line.

Usage:
    Command Line:
        python main.py                                  # serve the API
        python main.py --port 8080 --debug
        python main.py --input invoice.pdf --output result.json

    Python:
        from main import run_analysis
        result = run_analysis("invoice.pdf")

Author: ML Engineering Team
Version: 1.0.0
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import ConfigurationManager, get_config
from src.utils.logger import setup_logger_from_config, get_logger, LOGGER_NAMESPACE
from src.utils.helpers import ensure_directory, guess_content_type
from src.utils.exceptions import DocumentIntelligenceError, FileEmptyError, InvalidFileTypeError


def parse_arguments() -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed argument namespace.
    """
    parser = argparse.ArgumentParser(
        description="Document Intelligence invoice analysis service",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    Serve the API:
        python main.py --host 0.0.0.0 --port 8000

    Analyze a local invoice:
        python main.py --input invoice.pdf --output result.json
        """
    )

    parser.add_argument(
        "--input", "-i",
        type=str,
        default=None,
        help="Analyze this PDF/JPG/PNG file instead of serving the API"
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Write the analysis JSON here (default: stdout)"
    )

    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to bind the API to (default: api.host from config)"
    )

    parser.add_argument(
        "--port", "-p",
        type=int,
        default=None,
        help="Port to bind the API to (default: api.port from config)"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to custom configuration file"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    return parser.parse_args()


def initialize_system(args: argparse.Namespace) -> ConfigurationManager:
    """
    Initialize configuration and logging.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Initialized configuration manager.
    """
    config = ConfigurationManager(args.config)
    logger = setup_logger_from_config()

    if args.debug:
        logging.getLogger(LOGGER_NAMESPACE).setLevel(logging.DEBUG)
        for handler in logging.getLogger(LOGGER_NAMESPACE).handlers:
            handler.setLevel(logging.DEBUG)

    logger.info("=" * 60)
    logger.info("DOCUMENT INTELLIGENCE SERVICE")
    logger.info("=" * 60)
    logger.info(f"Version: {config.get('project.version', '1.0.0')}")

    return config


def load_document(input_path: str) -> bytes:
    """
    Read a local document, applying the same checks as the API.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        FileEmptyError: If the file is empty.
        InvalidFileTypeError: If the file is not a PDF, JPG or PNG.
    """
    path = Path(input_path)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")

    content = path.read_bytes()
    if not content:
        raise FileEmptyError(path.name)

    allowed = [t.lower() for t in get_config("api.allowed_content_types", [])]
    content_type = guess_content_type(path)
    if content_type not in allowed:
        raise InvalidFileTypeError(content_type, allowed)
    return content


def run_analysis(input_path: str, config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Analyze one local document.

    Args:
        input_path: Path to a PDF, JPG or PNG file.
        config_path: Optional custom configuration file path.

    Returns:
        The grouped invoice data as a dictionary.

    Example:
        >>> data = run_analysis("invoice.pdf")
        >>> data["InvoiceFields"]["InvoiceId"]
    """
    ConfigurationManager(config_path)
    from src.analyzer import InvoiceAnalyzer

    logger = get_logger(__name__)
    document = load_document(input_path)
    logger.info(f"Analyzing: {input_path}")

    async def _analyze() -> Dict[str, Any]:
        analyzer = InvoiceAnalyzer()
        try:
            result = await analyzer.analyze(document)
        finally:
            await analyzer.close()
        return result.to_dict()

    return asyncio.run(_analyze())


def serve(host: Optional[str] = None, port: Optional[int] = None) -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "src.api.app:create_app",
        factory=True,
        host=host or get_config("api.host", "0.0.0.0"),
        port=port or get_config("api.port", 8000),
        log_level=str(get_config("logging.level", "INFO")).lower(),
    )


def main() -> int:
    """
    Main function - entry point for command-line execution.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        args = parse_arguments()
        initialize_system(args)
        logger = get_logger(__name__)

        if args.input is None:
            serve(args.host, args.port)
            return 0

        invoice_data = run_analysis(args.input, args.config)
        output = json.dumps(invoice_data, indent=2)

        if args.output:
            output_path = Path(args.output)
            ensure_directory(output_path.parent)
            output_path.write_text(output, encoding="utf-8")
            logger.info(f"Analysis written to: {output_path}")
        else:
            print(output)

        return 0

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except DocumentIntelligenceError as e:
        print(f"Error [{e.error_code}]: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 130

    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        if "--debug" in sys.argv:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
