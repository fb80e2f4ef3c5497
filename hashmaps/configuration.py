import json

from pydantic import BaseModel, Field


DEFAULT_INITIAL_CAPACITY = 10
DEFAULT_LOAD_FACTOR_THRESHOLD = 0.75
DEFAULT_INITIAL_CHAIN_COUNT = 100
DEFAULT_CHAIN_INITIAL_CAPACITY = 16


class _MapConfiguration(BaseModel):
    """Shared JSON persistence for map configurations. Only parameters are saved, never map contents"""

    def display(self):
        """Dump the configuration into the console for visual inspection"""
        print(json.dumps(self.model_dump(), indent=4))

    def save(self, path: str, compact=False):
        """
        Save the map configuration object as a JSON object

        @param path: The path and filename to save the configuration
        @param compact: Whether the JSON saved should be compact or indented
        """
        with open(path, "w") as fp:
            if compact:
                json.dump(self.model_dump(), fp)
            else:
                json.dump(self.model_dump(), fp, indent=4)

    @classmethod
    def load(cls, path: str):
        """Load a map configuration object"""
        with open(path, 'r') as fp:
            return cls(**json.load(fp))


class ArrayMapConfiguration(_MapConfiguration):
    """Defines construction parameters of a standalone ArrayMap"""
    initial_capacity: int = Field(DEFAULT_INITIAL_CAPACITY, gt=0)


class ChainedHashMapConfiguration(_MapConfiguration):
    """Defines construction parameters and sizing policy of a ChainedHashMap"""
    load_factor_threshold: float = Field(DEFAULT_LOAD_FACTOR_THRESHOLD, gt=0)
    initial_chain_count: int = Field(DEFAULT_INITIAL_CHAIN_COUNT, gt=0)
    chain_initial_capacity: int = Field(DEFAULT_CHAIN_INITIAL_CAPACITY, gt=0)
