"""Letter Boxed solver configuration."""

from dotenv import find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None

DEFAULT_DICTIONARY_URL = (
    "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"
)


class LetterBoxSettings(BaseSettings):
    """Configuration settings for the Letter Boxed solver."""

    dictionary_url: str = DEFAULT_DICTIONARY_URL
    """Newline-delimited word list fetched once per process."""

    word_list_path: str | None = None
    """Optional local word list. When set, it is used instead of `dictionary_url`."""

    max_word_length: int = 12
    """Longest dictionary word considered. A performance bound, not a puzzle rule. Default: 12."""

    request_timeout: float = 30.0
    """Timeout in seconds for the dictionary download. Default: 30."""

    max_sessions: int = 1000
    """Most sessions the web API keeps; the least recently used one is dropped past this. Default: 1000."""

    model_config = SettingsConfigDict(
        env_prefix="LETTERBOX_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = LetterBoxSettings()
