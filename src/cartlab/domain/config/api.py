"""Remote API configuration model."""

from pydantic import BaseModel, ConfigDict, Field


class ApiConfig(BaseModel):
    """Configuration for the cart data endpoint.
    
    Attributes:
        base_url: Scheme and host of the API server
        data_path: Path of the cart data resource
        timeout: Per-request timeout in seconds
    """

    base_url: str = Field("http://localhost:9726", min_length=1)
    data_path: str = "/server_request_data.php"
    timeout: float = Field(10.0, gt=0.0, le=300.0)

    model_config = ConfigDict(extra="forbid")
