from gas_oracle.oracles.base_oracle import GasOracle
from gas_oracle.oracles.blocknative import BlockNativeOracle
from gas_oracle.oracles.web3_node import Web3NodeOracle

__all__ = ['GasOracle', 'BlockNativeOracle', 'Web3NodeOracle']
