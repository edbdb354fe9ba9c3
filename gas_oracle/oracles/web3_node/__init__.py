from gas_oracle.oracles.web3_node.web3_node_oracle import Web3NodeOracle  # noqa: F401
