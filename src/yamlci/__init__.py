
from .config import OutputOptions, RunOptions
from .errors import ConfigParseError, DocumentError, ExecutionError, UndefinedVariableError, YamlCIError
from .model import Job, PipelineDocument, ProcessorResult, RunSpec, Step, StepResult
from .runner import run_file, run_job, run_pipeline, run_step

__all__ = [
    "run_pipeline", "run_file", "run_job", "run_step",
    "PipelineDocument", "Job", "Step", "RunSpec", "StepResult", "ProcessorResult",
    "RunOptions", "OutputOptions",
    "YamlCIError", "DocumentError", "UndefinedVariableError", "ExecutionError", "ConfigParseError",
]
