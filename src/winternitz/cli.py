#!/usr/bin/env python3
# coding=utf-8
# Distributed under the MIT software license, see the accompanying
# file LICENSE or http://www.opensource.org/licenses/mit-license.php.
import logging
import time
from binascii import Error as BinasciiError

import click
import simplejson as json

from winternitz.core import config
from winternitz.core.misc import logger
from winternitz.crypto.WOTS import WOTS
from winternitz.crypto.exceptions import WOTSException
from winternitz.crypto.misc import hash_functions, bin2hstr, hstr2bin
from winternitz.crypto.random_number_generator import RNG
from winternitz.crypto.wots_params import WOTSParams


class CLIContext(object):
    def __init__(self, verbose, hash_function, output_json):
        self.verbose = verbose
        self.hash_function = hash_function
        self.output_json = output_json


def _print_error(ctx, error_descr):
    logger.error(error_descr)
    if ctx.obj.output_json:
        click.echo(json.dumps({'error': error_descr}))
        ctx.exit(1)
    raise click.ClickException(error_descr)


def _wots(ctx, w):
    try:
        return WOTS(w, ctx.obj.hash_function)
    except WOTSException as e:
        _print_error(ctx, str(e))


def _generate(ctx, wots):
    try:
        return wots.generate()
    except WOTSException as e:
        _print_error(ctx, str(e))


def _set_logger(verbose, no_colors):
    log_level = logging.DEBUG if verbose else getattr(logging, str(config.user.log_level).upper(), logging.INFO)
    logger.logger.setLevel(log_level)

    file_handler = logger.log_to_file(config.user.log_path)
    file_handler.setLevel(logging.DEBUG)
    logger.set_colors(not no_colors, logger.LOG_FORMAT_FULL)


########################
########################
########################
########################

@click.version_option(version=config.dev.version, prog_name='Winternitz One-Time Signature CLI')
@click.group()
@click.option('--verbose', '-v', default=False, is_flag=True, help='verbose output whenever possible')
@click.option('--hash_function', type=click.Choice(list(hash_functions.keys())), default=config.user.hash_function,
              help='hash function used for chains and message digests')
@click.option('--json', default=False, is_flag=True, help='output in json')
@click.option('--no-colors', 'no_colors', default=False, is_flag=True, help='disables colored log output')
@click.pass_context
def wots_cli(ctx, verbose, hash_function, json, no_colors):
    """
    Winternitz one-time signatures. Every key pair signs exactly one message.
    """
    ctx.obj = CLIContext(verbose=verbose, hash_function=hash_function, output_json=json)
    _set_logger(verbose, no_colors)
    logger.debug('Log file %s', config.user.log_path)


@wots_cli.command(name='params')
@click.option('--w', 'ws', type=int, multiple=True, help='Winternitz parameter, may be repeated')
@click.pass_context
def params(ctx, ws):
    """
    Shows the parameter table for each w
    """
    if not ws:
        ws = config.dev.recommended_w

    rows = []
    for w in ws:
        try:
            rows.append(WOTSParams(w, ctx.obj.hash_function).describe())
        except WOTSException as e:
            _print_error(ctx, str(e))

    if ctx.obj.output_json:
        click.echo(json.dumps({'params': rows}))
        return

    click.echo('{:>5} {:>4} {:>6} {:>6} {:>6} {:>10}'.format('w', 'n', 'len1', 'len2', 'len', 'sig bytes'))
    for row in rows:
        click.echo('{w:>5} {n:>4} {len1:>6} {len2:>6} {len:>6} {signature_size:>10}'.format(**row))


@wots_cli.command(name='demo')
@click.option('--w', 'ws', type=int, multiple=True, help='Winternitz parameter, may be repeated')
@click.pass_context
def demo(ctx, ws):
    """
    Signs and verifies a short message for each w, reporting timings and sizes
    """
    if not ws:
        ws = config.dev.recommended_w

    results = []
    for w in ws:
        wots = _wots(ctx, w)
        keys = _generate(ctx, wots)
        message = 'Signing with w={}'.format(w)

        start_time = time.perf_counter()
        signature = wots.sign(keys.private_key, message.encode())
        sign_duration = time.perf_counter() - start_time

        start_time = time.perf_counter()
        is_valid = wots.verify(keys.public_key, message.encode(), signature)
        verify_duration = time.perf_counter() - start_time

        results.append({'w': w,
                        'message': message,
                        'sign_seconds': sign_duration,
                        'verify_seconds': verify_duration,
                        'signature_components': len(signature),
                        'valid': is_valid,
                        'first_component': bin2hstr(signature[0][:8])})

    public_key = _generate(ctx, _wots(ctx, config.dev.recommended_w[1])).public_key
    public_key_info = {'components': len(public_key),
                       'component_size': len(public_key[0]),
                       'total_size': sum(len(c) for c in public_key)}

    if ctx.obj.output_json:
        click.echo(json.dumps({'results': results, 'public_key': public_key_info}))
        return

    click.echo('Winternitz One-Time Signature Demo')
    click.echo('=' * 48)
    for result in results:
        click.echo('')
        click.echo('Testing with Winternitz parameter w = {}'.format(result['w']))
        click.echo('    Message: {}'.format(result['message']))
        click.echo('    Signing time: {:.6f}s'.format(result['sign_seconds']))
        click.echo('    Verification time: {:.6f}s'.format(result['verify_seconds']))
        click.echo('    Signature size: {} components'.format(result['signature_components']))
        click.echo('    Signature valid: {}'.format(result['valid']))
        click.echo('    First signature component (hex): {}'.format(result['first_component']))

    click.echo('')
    click.echo('Public Key Information:')
    click.echo('   Components: {}'.format(public_key_info['components']))
    click.echo('   Each component size: {} bytes'.format(public_key_info['component_size']))
    click.echo('   Total public key size: {} bytes'.format(public_key_info['total_size']))


@wots_cli.command(name='keygen')
@click.option('--w', type=int, default=config.user.wots_w, help='Winternitz parameter')
@click.option('--seed', default=None, help='hex encoded master seed, derives the key pair deterministically')
@click.pass_context
def keygen(ctx, w, seed):
    """
    Generates a key pair from a master seed and prints its public key.
    A fresh master seed is drawn and shown when none is given.
    """
    wots = _wots(ctx, w)

    try:
        master_seed = RNG.seed() if seed is None else hstr2bin(seed)
        keys = wots.from_seed(master_seed)
    except (BinasciiError, ValueError):
        _print_error(ctx, 'Master seed must be a hex string')
    except WOTSException as e:
        _print_error(ctx, str(e))

    public_key = keys.public_key
    if ctx.obj.output_json:
        click.echo(json.dumps({'params': wots.params.describe(),
                               'seed': bin2hstr(master_seed),
                               'public_key': public_key.hexstr,
                               'pubhash': bin2hstr(public_key.pubhash)}))
        return

    click.echo('seed: {}'.format(bin2hstr(master_seed)))
    click.echo('pubhash: {}'.format(bin2hstr(public_key.pubhash)))
    for i, element in enumerate(public_key.hexstr):
        click.echo('{:>4} {}'.format(i, element))


@wots_cli.command(name='sign-verify')
@click.argument('message')
@click.option('--w', type=int, default=config.user.wots_w, help='Winternitz parameter')
@click.option('--tamper', default=None, help='also verify this text against the same signature')
@click.pass_context
def sign_verify(ctx, message, w, tamper):
    """
    Signs MESSAGE with a fresh key pair and verifies it
    """
    wots = _wots(ctx, w)
    keys = _generate(ctx, wots)
    signature = wots.sign(keys.private_key, message.encode())

    output = {'message': message,
              'signature': signature.hexstr,
              'valid': wots.verify(keys.public_key, message.encode(), signature)}
    if tamper is not None:
        output['tampered_message'] = tamper
        output['tampered_valid'] = wots.verify(keys.public_key, tamper.encode(), signature)

    if ctx.obj.output_json:
        click.echo(json.dumps(output))
        return

    if ctx.obj.verbose:
        for i, element in enumerate(output['signature']):
            click.echo('{:>4} {}'.format(i, element))
    click.echo('{} components, valid: {}'.format(len(signature), output['valid']))
    if tamper is not None:
        click.echo('"{}" valid: {}'.format(tamper, output['tampered_valid']))


def main():
    logger.initialize_default()
    wots_cli()


if __name__ == '__main__':
    main()
