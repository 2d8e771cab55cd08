from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from bson import ObjectId

USERS_COLLECTION = "users"


@dataclass
class User:
    email: str
    password: str
    # Assigned by the store on insert
    id: Optional[ObjectId] = field(default=None)

    def to_document(self) -> Dict[str, Any]:
        """
        Serialize User to a MongoDB document.

        The `_id` key is only present once the store has assigned one, so a
        fresh user lets MongoDB generate its identifier.
        """
        document: Dict[str, Any] = {"email": self.email, "password": self.password}
        if self.id is not None:
            document["_id"] = self.id
        return document

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "User":
        return cls(
            id=document.get("_id"),
            email=document["email"],
            password=document["password"],
        )
