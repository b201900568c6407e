import sys

from optionsparser import OptionsParser, OptionType
from optionsparser.logger import logger
from optionsparser.utils import setup_logging

options = OptionsParser(
    header="My console application",
    footer="Example build of optionsparser",
)

option = options.add_option("help", "h", OptionType.BOOLEAN)
option.long_arg = "help"
option.help_text = "Display this help text and exit"

option = options.add_option("logfile", "l", OptionType.FILE, False)
option.long_arg = "logfile"
option.help_text = "Set a logfile to enable logging"

option = options.add_option("retries", "r", OptionType.INTEGER)
option.long_arg = "retries"
option.help_text = "How often to retry"
option.value = 3

options.add_option("input", "", OptionType.STRING, True, help_text="Input name")

if __name__ == "__main__":
    ok = options.parse_arguments(sys.argv[1:])
    if options.get_opt_boolean("help"):
        options.render_help()
        sys.exit(0)

    options.print_diagnostics()  # there can also be warnings...
    if not ok:
        sys.exit(1)

    if options.is_option_set("logfile"):
        setup_logging(log_filename=str(options.get_opt_file("logfile")))
        logger.info("Started My Application")

    print(f"input={options.get_opt_string('input')} retries={options.get_opt_int('retries')}")
