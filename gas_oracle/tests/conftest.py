from gas_oracle.tests.fixtures import *  # noqa: F401, F403
