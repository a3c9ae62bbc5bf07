# standard imports
import logging

# external imports
import pytest

# local imports
import celophane.cli

logg = logging.getLogger()

holder = '0x' + 'ee' * 20


def test_account_balance_args():
    argparser = celophane.cli.ArgumentParser()
    args = argparser.parse_args([
        '--endpoint', 'ws://localhost:8546',
        '-vv',
        'account',
        'balance',
        holder,
        ])
    assert args.cmd == 'account'
    assert args.account_cmd == 'balance'
    assert args.address.lower() == holder
    assert args.endpoint == 'ws://localhost:8546'
    assert args.vv


def test_address_without_prefix():
    argparser = celophane.cli.ArgumentParser()
    args = argparser.parse_args(['account', 'balance', holder[2:]])
    assert args.address.lower() == holder


@pytest.mark.parametrize('address', [
    '0xdeadbeef',
    '0x' + 'zz' * 20,
    'ee' * 21,
    ])
def test_invalid_address(address):
    argparser = celophane.cli.ArgumentParser()
    with pytest.raises(SystemExit):
        argparser.parse_args(['account', 'balance', address])


def test_exchange_show_args():
    argparser = celophane.cli.ArgumentParser()
    args = argparser.parse_args(['exchange', 'show'])
    assert args.cmd == 'exchange'
    assert args.exchange_cmd == 'show'
    assert args.amount == None

    args = argparser.parse_args(['exchange', 'show', '--amount', '42'])
    assert args.amount == 42


@pytest.mark.parametrize('amount', ['-1', '1e18', 'foo'])
def test_invalid_amount(amount):
    argparser = celophane.cli.ArgumentParser()
    with pytest.raises(SystemExit):
        argparser.parse_args(['exchange', 'show', '--amount', amount])


def test_missing_command():
    argparser = celophane.cli.ArgumentParser()
    with pytest.raises(SystemExit):
        argparser.parse_args([])
    with pytest.raises(SystemExit):
        argparser.parse_args(['account'])


def test_argumentparser_to_config():
    argparser = celophane.cli.ArgumentParser()
    args = argparser.parse_args(['exchange', 'show'])
    config = celophane.cli.Config.from_args(args)
    assert config.get('RPC_PROVIDER') == 'http://localhost:8545'
    assert config.get('CELO_REGISTRY_ADDRESS') == '0x000000000000000000000000000000000000ce10'
    assert int(config.get('EXCHANGE_AMOUNT')) == 10 ** 18

    args = argparser.parse_args(['--endpoint', 'https://forno.celo.org', 'exchange', 'show', '--amount', '13'])
    config = celophane.cli.Config.from_args(args)
    assert config.get('RPC_PROVIDER') == 'https://forno.celo.org'
    assert int(config.get('EXCHANGE_AMOUNT')) == 13


def test_subcommands_do_not_take_root_options():
    argparser = celophane.cli.ArgumentParser()
    args = argparser.parse_args(['--endpoint', 'http://localhost:8545', 'account', 'balance', holder])
    assert args.endpoint == 'http://localhost:8545'

    with pytest.raises(SystemExit):
        argparser.parse_args(['account', 'balance', holder, '--endpoint', 'http://localhost:8545'])
    with pytest.raises(SystemExit):
        argparser.parse_args(['exchange', '--endpoint', 'http://localhost:8545', 'show'])


def test_config_ignores_environment(
        monkeypatch,
        ):
    monkeypatch.setenv('RPC_PROVIDER', 'ftp://elsewhere')
    monkeypatch.setenv('CELOPHANE_RPC_PROVIDER', 'ftp://elsewhere')
    monkeypatch.setenv('EXCHANGE_AMOUNT', 'foo')
    monkeypatch.setenv('CELO_REGISTRY_ADDRESS', '0x' + 'ab' * 20)

    argparser = celophane.cli.ArgumentParser()
    args = argparser.parse_args(['exchange', 'show'])
    config = celophane.cli.Config.from_args(args)
    assert config.get('RPC_PROVIDER') == 'http://localhost:8545'
    assert int(config.get('EXCHANGE_AMOUNT')) == 10 ** 18
    assert config.get('CELO_REGISTRY_ADDRESS') == '0x000000000000000000000000000000000000ce10'

    args = argparser.parse_args(['--endpoint', 'ws://localhost:8546', 'exchange', 'show', '--amount', '7'])
    config = celophane.cli.Config.from_args(args)
    assert config.get('RPC_PROVIDER') == 'ws://localhost:8546'
    assert int(config.get('EXCHANGE_AMOUNT')) == 7
