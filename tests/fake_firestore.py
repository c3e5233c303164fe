"""In-memory stand-in for the slice of the Firestore client API the story store uses."""


class FakeDocumentReference:
    def __init__(self, client: "FakeFirestoreClient", path: str):
        self._client = client
        self.path = path
        self.id = path.rsplit("/", 1)[-1]

    def collection(self, name: str) -> "FakeCollectionReference":
        return FakeCollectionReference(self._client, f"{self.path}/{name}")

    def set(self, data: dict) -> None:
        self._client.record_write("set", self.path, data)
        self._client.documents[self.path] = dict(data)

    def update(self, data: dict) -> None:
        if self.path not in self._client.documents:
            raise KeyError(f"document not found: {self.path}")
        self._client.record_write("update", self.path, data)
        self._client.documents[self.path].update(data)


class FakeCollectionReference:
    def __init__(self, client: "FakeFirestoreClient", path: str):
        self._client = client
        self.path = path

    def document(self, document_id: str) -> FakeDocumentReference:
        return FakeDocumentReference(self._client, f"{self.path}/{document_id}")

    def add(self, data: dict):
        self._client.auto_id_counter += 1
        doc_ref = self.document(f"auto-{self._client.auto_id_counter:04d}")
        self._client.record_write("add", doc_ref.path, data)
        self._client.documents[doc_ref.path] = dict(data)
        return None, doc_ref


class FakeFirestoreClient:
    def __init__(self, fail_on: set[str] | None = None):
        self.documents: dict[str, dict] = {}
        self.writes: list[tuple[str, str, dict]] = []
        self.auto_id_counter = 0
        self.fail_on = fail_on or set()

    def record_write(self, operation: str, path: str, data: dict) -> None:
        if operation in self.fail_on:
            raise RuntimeError(f"simulated firestore {operation} failure")
        self.writes.append((operation, path, dict(data)))

    def collection(self, name: str) -> FakeCollectionReference:
        return FakeCollectionReference(self, name)
