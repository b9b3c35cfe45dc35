import sys

from ape import accounts, networks, project

from deployment.constants import (
    CONTRACT_NAME,
    DEPLOYER_ACCOUNT,
    DEPLOYMENT_OUTPUT_FILE,
    MINIMUM_STAKE,
    PUBLISH,
)
from deployment.deployer import parse_stake, report_failure, run, select_signer


def main():
    network = networks.provider.network

    try:
        signer = select_signer(accounts, network.name, DEPLOYER_ACCOUNT)
        minimum_stake = parse_stake(MINIMUM_STAKE)
        container = getattr(project, CONTRACT_NAME)
    except Exception:
        report_failure()
        sys.exit(1)

    sys.exit(
        run(
            signer,
            container,
            network.choice,
            minimum_stake,
            publish=PUBLISH,
            output_file=DEPLOYMENT_OUTPUT_FILE,
        )
    )
