from gas_oracle.oracles.blocknative.blocknative_oracle import BlockNativeOracle  # noqa: F401
