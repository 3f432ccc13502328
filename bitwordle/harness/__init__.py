from .core import GameSimulator, Snapshot, Step, run_case, run_batch
from .io import write_csv, write_manifest

__all__ = ["GameSimulator", "Snapshot", "Step", "run_case", "run_batch", "write_csv",
           "write_manifest"]
