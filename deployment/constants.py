import os

CONTRACT_NAME = "Project"
CONTRACT_DESCRIPTION = "Quantum-Resistant Genetic Algorithm Oracle Network"

# Required by the Project constructor
DEFAULT_MINIMUM_STAKE = "0.01 ether"

LOCAL_BLOCKCHAIN_ENVIRONMENTS = ("local",)


def parse_flag(value):
    return value.strip().lower() in ("1", "true", "yes")


DEPLOYER_ACCOUNT = os.environ.get("DEPLOYER_ACCOUNT", "deployer")
MINIMUM_STAKE = os.environ.get("MINIMUM_STAKE", DEFAULT_MINIMUM_STAKE)
PUBLISH = parse_flag(os.environ.get("PUBLISH", "false"))
DEPLOYMENT_OUTPUT_FILE = os.environ.get("DEPLOYMENT_OUTPUT_FILE")
