"""cfg : lecture et écriture d'une clé dans un fichier INI.

    cfg -f {fichier} get {section} {clé}
    cfg -f {fichier} set {section} {clé} {valeur}

Sans -f, le fichier est `default.cfg` (ou cli.default_file des réglages).
Toute erreur est affichée sur une ligne de la sortie standard et le
processus se termine avec le code 1.
"""

import argparse
import sys
from pathlib import Path

from cfgini.config.settings import Settings, load_settings
from cfgini.errors import (
    ApplicationError,
    ConsoleErrorHandler,
    ErrorHandlerChain,
    LoggerErrorHandler,
)
from cfgini.ini.manager import IniFileManager
from cfgini.logging import FileLogger, Logger, NullLogger

ACTIONS = {"get": 2, "set": 3}


class UsageRequested(Exception):
    """Arguments invalides : afficher l'usage et sortir sans erreur."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageRequested(message)


def build_parser() -> argparse.ArgumentParser:
    """Construit le parseur d'arguments de `cfg`.

    Les options ne sont reconnues qu'avant l'action : tout ce qui
    suit `get` ou `set` est positionnel, y compris une valeur commençant par `-`.
    """
    parser = _ArgumentParser(prog="cfg", add_help=False)
    parser.add_argument("-f", dest="file", default=None,
                        help="fichier INI à lire ou modifier")
    parser.add_argument("--config", default=None,
                        help="fichier de réglages TOML ou JSON")
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("args", nargs=argparse.REMAINDER)
    return parser


def usage(prog: str = "cfg") -> int:
    """Affiche l'usage sur la sortie standard et retourne 0."""
    print(f"{prog} -f {{filename}} get {{section_name}} {{key}}")
    print(f"{prog} -f {{filename}} set {{section_name}} {{key}} {{value}}")
    return 0


def build_logger(settings: Settings) -> Logger:
    """FileLogger si un fichier de log est configuré, NullLogger sinon."""
    log_file = settings.log_file()
    if log_file is None:
        return NullLogger()
    return FileLogger(log_file, settings.logging_config())


def main(argv: list[str] | None = None) -> int:
    """Point d'entrée de la CLI.

    Args:
        argv: Arguments sans le nom du programme (défaut: sys.argv[1:]).

    Returns:
        Code de sortie du processus.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageRequested:
        return usage(parser.prog)

    if args.help or len(args.args) < 3:
        return usage(parser.prog)
    action, *params = args.args
    if action not in ACTIONS or len(params) < ACTIONS[action]:
        return usage(parser.prog)

    errors = ErrorHandlerChain([ConsoleErrorHandler()])
    try:
        settings = load_settings(args.config)
        logger = build_logger(settings)
        errors.add_handler(LoggerErrorHandler(logger))

        manager = IniFileManager(logger, settings.cli.encoding)
        path = Path(args.file or settings.cli.default_file)
        if action == "get":
            section, key = params[:2]
            print(manager.get_key(path, section, key))
        else:
            section, key, value = params[:3]
            manager.set_key(path, section, key, value)
    except (ApplicationError, OSError) as e:
        return errors.handle(e)
    return 0


def run() -> None:
    """Point d'entrée du script console `cfg`."""
    sys.exit(main())


if __name__ == "__main__":
    run()
