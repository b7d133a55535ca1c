"""Shared logic layer between the CLI and Telegram front-ends.

LogicManager.execute: parses the input, runs the command against the model,
saves the person list, and returns the result.
"""

import logging

from .adapters.json_storage import JsonPersonStore
from .config import Config
from .core.commands import CommandResult
from .core.exceptions import CommandException, DataLoadingError, TAssistError
from .core.model import ModelManager
from .core.parsers import parse_command
from .core.person import Person, format_person
from .ports.person_store import PersonStore

logger = logging.getLogger(__name__)

FILE_OPS_ERROR_FORMAT = "Could not save data due to the following error: {}"


def get_store(config: Config) -> JsonPersonStore:
    """Resolve the data file from config."""
    return JsonPersonStore(config.data_path)


def load_model(store: PersonStore) -> ModelManager:
    """Build a model from storage, starting empty if there is nothing usable."""
    try:
        persons = store.load()
    except DataLoadingError as e:
        logger.warning(f"Data file could not be loaded, starting with an empty list: {e}")
        return ModelManager()

    if persons is None:
        logger.info("No saved data found, starting with an empty list")
        return ModelManager()
    return ModelManager(persons)


class LogicManager:
    """Runs user input through the parse/execute pipeline."""

    def __init__(self, model: ModelManager, store: PersonStore | None = None):
        self.model = model
        self.store = store

    def execute(self, command_text: str) -> CommandResult:
        """
        Parse and execute one line of input.

        Raises ParseException or CommandException; the model is unchanged when
        either is raised before the save step.
        """
        logger.info(f"----------------[USER COMMAND][{command_text}]")

        try:
            command = parse_command(command_text)
            result = command.execute(self.model)
        except TAssistError as e:
            logger.info(f"Command failed: {e}")
            raise

        if self.store is not None:
            try:
                self.store.save(self.model.persons)
            except OSError as e:
                raise CommandException(FILE_OPS_ERROR_FORMAT.format(e)) from e

        logger.debug(f"Result: {result.feedback}")
        return result

    def get_filtered_person_list(self) -> list[Person]:
        return self.model.get_filtered_person_list()


def format_person_list(persons: list[Person]) -> str:
    """Numbered listing of persons, matching the indices commands accept."""
    return "\n".join(f"{i}. {format_person(p)}" for i, p in enumerate(persons, start=1))
