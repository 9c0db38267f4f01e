from abc import ABC, abstractmethod
from typing import Optional

class ImportResolver(ABC):
    """
    Abstract base class for import resolution strategies.
    Responsible for mapping import strings (e.g. 'folder/types.proto')
    to absolute workspace URIs.
    """

    @abstractmethod
    def resolve(self, source_file: str, import_string: str) -> Optional[str]:
        """
        Resolves an import string to an absolute URI.

        Args:
            source_file: The URI of the file containing the import
                         (e.g., "platform:/resource/project/src/main.proto").
            import_string: The raw string from the import statement
                           (e.g., "types.proto", "folder/types.proto").

        Returns:
            Absolute URI of the imported file, or None if resolution fails.
            The result may lie in another project of the workspace.
        """
        pass
