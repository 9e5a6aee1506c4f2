import logging

from rich.logging import RichHandler

from futris.game import ShapeKind
from futris.utils.logging import setup_logger
from futris.visualization.human_play import KEY_TO_COMMAND, parse_args
from futris.visualization.renderer import EMPTY_COLOR, Renderer, rgb_for_value


def test_rgb_for_values():
    assert rgb_for_value(0) == EMPTY_COLOR
    assert rgb_for_value(int(ShapeKind.I)) == (0, 186, 212)
    assert rgb_for_value(-int(ShapeKind.O)) == rgb_for_value(int(ShapeKind.O))


def test_window_size():
    renderer = Renderer(cell_size=10, margin=5)
    assert renderer.window_size(10, 30) == (110, 315)


def test_every_command_has_a_key():
    assert len(set(KEY_TO_COMMAND.values())) == 5


def test_parse_args_defaults():
    args = parse_args([])
    assert (args.width, args.height, args.seed) == (10, 30, None)
    args = parse_args(["--height", "20", "--seed", "3", "--no-rich"])
    assert (args.height, args.seed, args.no_rich) == (20, 3, True)


def test_setup_logger_handlers():
    logger = setup_logger(name="futris-test", use_rich=False, level="debug")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert not isinstance(logger.handlers[0], RichHandler)

    logger = setup_logger(name="futris-test", use_rich=True)
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], RichHandler)
