"""
Per-message pipeline from inbound text to outgoing chunks.

Each inbound message is resolved against the current configuration
generation. Help text and alias errors are chunked and returned to the
originator; resolved commands are run through an executor and their output
is chunked the same way.
"""

import logging

from automesh.config.models import Config
from automesh.config.validation import validate_config
from automesh.core.types import ChunkSink, TextChunks
from automesh.exceptions import AliasError
from automesh.execution.runner import Executor
from automesh.parsing.outcomes import HelpText
from automesh.parsing.resolver import DEFAULT_TRIGGER, AliasResolver
from automesh.transport.outbox import prepare_outgoing

logger = logging.getLogger(__name__)

NON_ZERO_EXIT_MESSAGE = "Command exited with non-zero status."


class ConfigHolder:
    """
    Holds the current configuration generation.

    A reload replaces the whole validated tree with a single reference
    assignment, so readers see either the old or the new generation, never a
    mix of both.
    """

    def __init__(self, config: Config):
        self._config = config

    @property
    def current(self) -> Config:
        return self._config

    def swap(self, config: Config) -> Config:
        """
        Install a new configuration generation.

        Params:
            config: Fully loaded configuration to install

        Returns:
            The generation that was replaced

        Raises:
            ConfigValidationError: If the new configuration is invalid; the
                current generation is kept
        """
        validate_config(config)
        previous, self._config = self._config, config
        logger.info("Swapped in new config with %d top-level commands", len(config.commands))
        return previous


class MessageDispatcher:
    """Turns inbound alias messages into outgoing text chunks."""

    def __init__(
        self,
        config: Config | ConfigHolder,
        executor: Executor,
        trigger: str = DEFAULT_TRIGGER,
    ):
        self.holder = config if isinstance(config, ConfigHolder) else ConfigHolder(config)
        self.executor = executor
        self.trigger = trigger

    def handle(self, message: str) -> TextChunks | None:
        """
        Process one inbound message.

        Params:
            message: Decoded message text

        Returns:
            Chunks to send back, or None when the message is not an alias
        """
        message = message.rstrip()
        if not message.startswith(self.trigger):
            logger.debug("Ignoring non-alias message.")
            return None

        config = self.holder.current
        resolver = AliasResolver(config.commands, self.trigger)

        try:
            result = resolver.resolve(message)
        except AliasError as e:
            logger.warning("Alias error: %s", e)
            return prepare_outgoing(str(e), config)

        if isinstance(result, HelpText):
            return prepare_outgoing(result.text, config)

        try:
            execution = self.executor.run(result.command, result.env)
        except OSError as e:
            logger.error("Failed to run %r: %s", result.command, e)
            return prepare_outgoing(f"Error: {e}", config)

        chunks: TextChunks = []
        if not execution.succeeded:
            logger.warning("Command %r exited with status %d", result.command, execution.status)
            chunks.extend(prepare_outgoing(execution.stderr or NON_ZERO_EXIT_MESSAGE, config))
        chunks.extend(prepare_outgoing(execution.stdout, config))
        return chunks

    def dispatch(self, message: str, send: ChunkSink) -> int:
        """
        Process one message and hand every resulting chunk to ``send``.

        Returns:
            Number of chunks handed over
        """
        chunks = self.handle(message) or []
        for chunk in chunks:
            send(chunk)
        return len(chunks)
