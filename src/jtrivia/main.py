import argparse
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from .config import TriviaConfig
from .constants import DEFAULT_PATHS, MENU_BANNER, MENU_EXIT, MENU_OPTIONS, MENU_START
from .errors import TriviaError
from .game import GameSession
from .source import BaseQuestionSource, JServiceSource
from .utils.monitoring import SessionMetrics


def setup_logging(logging_settings: Dict[str, Any]) -> None:
    """Set up logging for both file and console output."""
    log_file = logging_settings['file']
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    root_logger = logging.getLogger()

    # Clear any existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    log_level = getattr(logging, logging_settings['level'].upper(), logging.INFO)
    console_level = getattr(logging, logging_settings.get('console_level', 'WARNING').upper(), logging.WARNING)
    root_logger.setLevel(min(log_level, console_level))

    try:
        from logging.handlers import RotatingFileHandler
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=logging_settings.get('max_size', 10485760),
            backupCount=logging_settings.get('backup_count', 5),
            encoding='utf-8'
        )
    except OSError as e:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        print(f"Warning: Could not set up rotating file handler: {e}")
    file_handler.setLevel(log_level)

    # Console stays quiet by default so log lines don't interleave with the game
    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)

    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s'
    )
    console_formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    file_handler.setFormatter(file_formatter)
    console_handler.setFormatter(console_formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    root_logger.info(f"Logging initialized - Level: {logging_settings['level']}")
    root_logger.info(f"Log file: {log_file}")


def read_line() -> Optional[str]:
    """Read one line from standard input, or None at end of input."""
    line = sys.stdin.readline()
    if not line:
        return None
    return line


def print_menu() -> None:
    print(MENU_BANNER)
    for option in MENU_OPTIONS:
        print(option)


def run_game(source: BaseQuestionSource) -> int:
    """
    Play questions until a wrong answer, a fetch failure, or end of input.

    Returns:
        int: The final score
    """
    logger = logging.getLogger(__name__)
    session = GameSession(source)
    metrics = SessionMetrics()

    try:
        while True:
            try:
                question = session.new_question()
            except TriviaError as e:
                logger.error(f"Could not get a question: {e}")
                metrics.record_error(type(e).__name__, str(e))
                print(f"could not get a question: {e}")
                break
            metrics.record_question_fetched()

            print(f"score: {session.score}")
            print(f"question: \n {question.title}")
            print("Answer: ", end="", flush=True)

            line = read_line()
            if line is None:
                break

            # Only the line terminator is removed; the comparison itself is exact
            if session.verify_answer(line.rstrip('\r\n')):
                session.score += question.value
                metrics.record_answer(True, question.value)
            else:
                metrics.record_answer(False)
                print("wrong answer, game over !")
                break
    finally:
        metrics.finalize_session()

    return session.score


def run_menu(source: BaseQuestionSource) -> None:
    """Show the menu until the user picks EXIT or input ends."""
    while True:
        print_menu()
        line = read_line()
        if line is None:
            return

        try:
            choice = int(line.strip())
        except ValueError:
            print("please insert a valid option")
            continue

        if choice == MENU_START:
            run_game(source)
        elif choice == MENU_EXIT:
            return
        else:
            print("please insert a valid option")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Command-line trivia game backed by jService')
    parser.add_argument('--config', default=DEFAULT_PATHS['config_file'],
                        help='Path to the JSON settings file')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Override the log level from the settings file')
    args = parser.parse_args(argv)

    try:
        config = TriviaConfig(args.config)
    except TriviaError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.log_level:
        config.logging_settings['level'] = args.log_level
    setup_logging(config.logging_settings)

    run_menu(JServiceSource(config))
    return 0


if __name__ == '__main__':
    sys.exit(main())
