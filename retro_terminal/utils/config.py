"""Service configuration definition."""

from pydantic_settings import BaseSettings


class ServiceConfig(BaseSettings):
    """
    Defines the configuration for the retro terminal server, loaded from environment
    variables or a .env file.
    """

    # MCP Server transport mechanism (e.g., "stdio", "sse", "streamable-http")
    MCP_TRANSPORT: str = "stdio"
    # Host for the MCP server to bind to. Defaults to 0.0.0.0 for accessibility.
    MCP_HOST: str = "0.0.0.0"
    # Port for the MCP server to listen on.
    MCP_PORT: int = 8661

    # Identity the simulated shell reports (whoami, prompt, /home/<user>).
    TERMINAL_USER: str = "guest"
    TERMINAL_HOSTNAME: str = "retro-terminal"
    # Column width used by `ls` when laying names out in a grid.
    TERM_WIDTH: int = 80

    # When disabled, loading commands return immediately instead of sleeping.
    LOADING_DELAYS_ENABLED: bool = True
    # Registers the file_editor tool.
    FEATURE_EDITOR_ENABLED: bool = True

    @property
    def display_home(self) -> str:
        return f"/home/{self.TERMINAL_USER}"

    class Config:
        """Pydantic configuration settings."""

        # We do not specify env_file here.
        # Environment loading is handled explicitly in main.py via load_dotenv
        # to ensure the correct .env file is used.
        extra = "ignore"
