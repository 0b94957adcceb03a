"""
Support library of the ISAAC generator: the reference implementation in `isaacrng.lib.isaac`,
seed helpers, byte conversion, configuration and logging.
"""
