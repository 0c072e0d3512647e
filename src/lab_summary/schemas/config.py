from dataclasses import dataclass


@dataclass
class PipelineConfig:
    language: str = "en"
    encoding: str = "utf-8"
    output_dir: str = "output"
    sparse_threshold: float = 0.5  # field_coverage below this marks a sparse parse
