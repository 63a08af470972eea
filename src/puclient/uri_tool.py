import json
import sys
from optparse import OptionParser

from pubase import get_log, print_pu_version, EXIT_ARGERROR, EXIT_FAILURE

from .configure import (load_program_config, get_currency_info,
                        get_default_currency, get_currency_codes)
from .uri import (PaymentUriError, EncodeRequest, Metadata, parse_uri,
                  encode_uri)

log = get_log()


def get_uritool_parser():
    description = (
        'Use this script to decode and encode payment URIs.\n'
        'The method is one of the following: \n'
        '(parse) Decodes a URI, e.g. bitcoin:<address>?amount=0.5, and '
        'shows the payment request as JSON.\n'
        '(encode) Builds a URI for an address, with optional amount '
        '(in the smallest unit, e.g. sats), label and message.')
    parser = OptionParser(usage='usage: %prog [options] [method] [args..]',
                          description=description)
    parser.add_option(
        '--datadir',
        dest='datadir',
        default="",
        help='Specify the path to a directory holding your payuri.cfg. '
        'By default, the directory .payuri is used.'
    )
    parser.add_option('--version',
                      action='callback',
                      callback=print_pu_version,
                      help='Print the version and exit.')
    parser.add_option('-c',
                      '--currency',
                      action='store',
                      type='str',
                      dest='currency',
                      default=None,
                      help='Currency code of a configured currency, '
                      'default is the default_currency config setting.')
    parser.add_option('-a',
                      '--amount',
                      action='store',
                      type='str',
                      dest='native_amount',
                      default=None,
                      help='(encode) amount in the smallest unit.')
    parser.add_option('-d',
                      '--denomination',
                      action='store',
                      type='str',
                      dest='denomination',
                      default=None,
                      help='(encode) denomination the amount is converted '
                      'through, default is the currency code.')
    parser.add_option('-l',
                      '--label',
                      action='store',
                      type='str',
                      dest='label',
                      default=None,
                      help='(encode) label for the payment.')
    parser.add_option('-m',
                      '--message',
                      action='store',
                      type='str',
                      dest='message',
                      default=None,
                      help='(encode) message for the payment.')
    return parser


def uri_tool_main(args=None):
    """Main uri tool script function; returned is a string
    (the output), errors exit with EXIT_ARGERROR or EXIT_FAILURE.
    """
    parser = get_uritool_parser()
    (options, args) = parser.parse_args(args)
    load_program_config(config_path=options.datadir)

    methods = ['parse', 'encode']
    if len(args) != 2 or args[0] not in methods:
        parser.error('Needs a method (one of ' + ', '.join(methods) +
                     ') and its argument')
        sys.exit(EXIT_ARGERROR)
    method, arg = args

    currency_code = options.currency or get_default_currency()
    try:
        currency_info = get_currency_info(currency_code)
    except ValueError as e:
        log.error(str(e) + "; configured currencies: " +
                  ", ".join(get_currency_codes()))
        sys.exit(EXIT_ARGERROR)

    try:
        if method == 'parse':
            parsed = parse_uri(arg, currency_info)
            return json.dumps(parsed.to_dict(), indent=4)
        metadata = None
        if options.label is not None or options.message is not None:
            metadata = Metadata(name=options.label, message=options.message)
        request = EncodeRequest(public_address=arg,
                                native_amount=options.native_amount,
                                currency_code=options.denomination,
                                metadata=metadata)
        return encode_uri(request, currency_info)
    except PaymentUriError as e:
        log.error("{}: {}".format(e.__class__.__name__, e))
        sys.exit(EXIT_FAILURE)
    except ValueError as e:
        log.error(str(e))
        sys.exit(EXIT_ARGERROR)
