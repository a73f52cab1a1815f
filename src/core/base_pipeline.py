"""
Base Pipeline Interface
Both ingestion pipelines (lab report, website scan) inherit from this base class
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List
from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class PipelineResult:
    """Standard result format for all pipelines"""
    pipeline_name: str
    timestamp: datetime
    data: Dict[str, Any]
    warnings: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)


class BasePipeline(ABC):
    """Abstract base class for all Sanum pipelines"""

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize the pipeline with configuration

        Args:
            config: Dictionary containing pipeline-specific configuration
        """
        self.config = config
        self.is_initialized = False

    @abstractmethod
    def initialize(self) -> bool:
        """
        Initialize the pipeline (load the Knowledge Base, open clients)

        Returns:
            bool: True if initialization successful, False otherwise
        """
        pass

    @abstractmethod
    def process(self, input_data: Any) -> PipelineResult:
        """
        Process input data through the pipeline

        Args:
            input_data: Input data specific to the pipeline

        Returns:
            PipelineResult: Standardized result object

        Raises:
            SanumError: on any failure the caller should report to the user
        """
        pass

    @abstractmethod
    def cleanup(self) -> None:
        """Release resources (HTTP sessions, clients)"""
        pass

    def validate_input(self, input_data: Any) -> None:
        """
        Validate input data format

        Args:
            input_data: Data to validate

        Raises:
            SanumError: if the input cannot be processed
        """
        return None
