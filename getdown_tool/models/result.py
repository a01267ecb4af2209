"""Result models for operations"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Dict, Any


@dataclass
class BuildResult:
    """Descriptor build result"""
    success: bool
    work_directory: Optional[Path] = None
    descriptor_path: Optional[Path] = None
    staged_files: List[Path] = field(default_factory=list)
    signing_enabled: bool = False
    error: Optional[str] = None
    duration: float = 0.0
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "success": self.success,
            "work_directory": str(self.work_directory) if self.work_directory else None,
            "descriptor_path": str(self.descriptor_path) if self.descriptor_path else None,
            "staged_files": [str(p) for p in self.staged_files],
            "signing_enabled": self.signing_enabled,
            "error": self.error,
            "duration": self.duration,
            "metadata": self.metadata,
        }
