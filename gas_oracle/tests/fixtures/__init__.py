from gas_oracle.tests.fixtures.aiohttp_session import *  # noqa: F401, F403
from gas_oracle.tests.fixtures.oracles import *  # noqa: F401, F403
