import json
from typing import Any, Dict, List, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field  # type: ignore

# (field name, (filename, content, content type)) as accepted by httpx
MultipartFile = Tuple[str, Tuple[str, bytes, str]]


class HTTPRequest(BaseModel):
    """HTTP request
    Args:
        url: The URL of the request
        method: The HTTP method to use
        headers: The headers to send with the request
        body: The JSON body of the request
        files: Multipart files to upload, the body is then sent as form fields
        path_params: The path parameters to use
        query_params: The query parameters to use
    """
    model_config = ConfigDict(populate_by_name=True)

    url: str = Field(alias="uri")
    method: str = Field(default="GET")
    headers: Dict[str, str] = Field(default_factory=dict)
    body: Union[Dict[str, Any], List[Any], bytes, None] = None
    files: List[MultipartFile] = Field(default_factory=list)
    path_params: Dict[str, str] = Field(default_factory=dict, alias="path")
    query_params: Dict[str, str] = Field(default_factory=dict, alias="query")

    def to_json(self) -> str:
        """
        Convert request to a JSON string.
        Bytes are decoded as UTF-8, files are represented by their names.
        """
        data = self.model_dump(exclude={"files"})
        data["files"] = [name for _, (name, _, _) in self.files]

        if isinstance(self.body, bytes):
            data["body"] = self.body.decode("utf-8", errors="replace")

        return json.dumps(data, indent=2)
