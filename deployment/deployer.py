import json
import traceback
from decimal import Decimal, InvalidOperation, localcontext

import click
from ape import convert
from ape.exceptions import ConversionError, NetworkError

from deployment.constants import (
    CONTRACT_DESCRIPTION,
    CONTRACT_NAME,
    DEFAULT_MINIMUM_STAKE,
    LOCAL_BLOCKCHAIN_ENVIRONMENTS,
)
from deployment.exceptions import DeploymentError


def parse_stake(value=DEFAULT_MINIMUM_STAKE):
    """
    Convert a stake such as ``"0.01 ether"`` to wei.

    Values that do not come out as a whole number of wei are rejected
    rather than truncated.
    """
    try:
        stake = convert(value, int)
    except ConversionError as err:
        raise DeploymentError(f"Invalid minimum stake '{value}'.") from err

    if stake <= 0:
        raise DeploymentError(f"Minimum stake must be positive, got '{value}'.")

    parts = value.split()
    if len(parts) == 2:
        amount, unit = parts
        try:
            with localcontext() as ctx:
                ctx.prec = 100
                exact = Decimal(amount) * convert(f"1 {unit}", int)
        except (ConversionError, InvalidOperation) as err:
            raise DeploymentError(f"Invalid minimum stake '{value}'.") from err

        if exact != stake:
            raise DeploymentError(
                f"Minimum stake '{value}' is not a whole number of wei."
            )

    return stake


def is_local_network(network_name):
    return network_name in LOCAL_BLOCKCHAIN_ENVIRONMENTS or network_name.endswith(
        "-fork"
    )


def select_signer(accounts, network_name, alias):
    if is_local_network(network_name):
        return accounts.test_accounts[0]

    try:
        return accounts.load(alias)
    except KeyError as err:
        raise DeploymentError(f"No account with alias '{alias}'.") from err


def deploy_project(signer, container, minimum_stake, publish=False):
    # ape blocks until the deployment receipt is mined
    return signer.deploy(container, minimum_stake, publish=publish)


def verification_command(address, network_choice):
    return f"ape run publish {address} --network {network_choice}"


def deployment_record(contract, signer, network_choice, minimum_stake):
    return {
        "contract": CONTRACT_NAME,
        "address": contract.address,
        "network": network_choice,
        "deployer": signer.address,
        "minimum_stake": minimum_stake,
    }


def write_deployment_record(record, filepath):
    with open(filepath, "w") as f:
        json.dump(record, f, indent=4)


def publish_contract(network, address):
    try:
        network.publish_contract(address)
    except NetworkError as err:
        raise DeploymentError(
            f"Unable to publish {address} on network '{network.name}'."
        ) from err


def report_failure():
    click.echo(traceback.format_exc(), err=True)


def run(
    signer,
    container,
    network_choice,
    minimum_stake,
    publish=False,
    output_file=None,
):
    """
    Deploy ``Project`` and report where it landed.

    Returns the process exit code: 0 once the contract is deployed, 1 if
    anything along the way raised. The error is printed to stderr in full.
    """
    try:
        click.echo("Starting deployment process...")

        click.echo(f"Deploying {CONTRACT_DESCRIPTION}...")
        contract = deploy_project(signer, container, minimum_stake, publish=publish)

        address = contract.address
        click.echo(f"Contract deployed at: {address}")

        click.echo("Verifying contract on explorer...")
        click.echo("Verification command:")
        click.echo(verification_command(address, network_choice))

        if output_file:
            record = deployment_record(contract, signer, network_choice, minimum_stake)
            write_deployment_record(record, output_file)
            click.echo(f"Deployment details saved to {output_file}")

    except Exception:
        report_failure()
        return 1

    return 0
