import logging

from hashmaps import ChainedHashMap, ChainedHashMapConfiguration

logging.basicConfig(level=logging.DEBUG)


config = ChainedHashMapConfiguration(load_factor_threshold=0.75, initial_chain_count=2, chain_initial_capacity=2)
# config = ChainedHashMapConfiguration.load("configurations/small.cfg.json")
config.display()

table = ChainedHashMap.from_configuration(config)
for k, v in [(1, "a"), (2, "b"), (3, "c")]:
    table.put(k, v)


print(table.size(), table.chain_count)
print(table.get(2))
print(table)
