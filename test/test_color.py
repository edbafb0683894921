import genprompt.object.color as color

import test_base

timeit = test_base.timeit

TEST = test_base.TestGenprompt()

ESC = '\033'
WHITE = '\\[' + ESC + '[1;37m\\]'


@timeit
def test_wrap():
    TEST.run(lambda: color.wrap('0;31m'),
             expected_return='\\[\033[0;31m\\]')
    TEST.run(lambda: color.end(),
             expected_return='\\[' + ESC + '[0m\\]')


@timeit
def test_known_names():
    TEST.run(lambda: color.resolve('red'), expected_return=color.wrap('0;31m'))
    TEST.run(lambda: color.resolve('light_cyan'), expected_return=color.wrap('1;36m'))
    TEST.run(lambda: color.resolve('light_purpl'), expected_return=color.wrap('1;35m'))
    TEST.run(lambda: color.resolve('gray'), expected_return=color.wrap('1:30m'))
    TEST.run(lambda: color.resolve('dark_gray'), expected_return=color.wrap('1;30m'))
    TEST.run(lambda: color.resolve('white'), expected_return=WHITE)


@timeit
def test_all_distinct():
    resolved = [color.resolve(name) for name in color.names()]
    TEST.check_eq('all colors distinct', len(resolved), len(set(resolved)))
    TEST.check_eq('color count', 17, len(resolved))
    TEST.check_eq('end is not a color', False, color.end() in resolved)
    for name in ('black', 'red', 'green', 'brown', 'blue', 'purple', 'cyan', 'light_gray', 'dark_gray', 'gray',
                 'light_blue', 'light_green', 'light_purpl', 'light_red', 'white', 'yellow'):
        TEST.check_eq(f'{name} is defined', True, name in color.names())


@timeit
def test_unknown_names():
    TEST.run(lambda: color.resolve(''), expected_return=WHITE)
    TEST.run(lambda: color.resolve('Light_Cyan'), expected_return=WHITE)
    TEST.run(lambda: color.resolve('purple '), expected_return=WHITE)
    TEST.run(lambda: color.resolve('light_purple'), expected_return=WHITE)
    TEST.run(lambda: color.resolve('RED'), expected_return=WHITE)


def main():
    test_wrap()
    test_known_names()
    test_all_distinct()
    test_unknown_names()
    TEST.report_failures('test_color')


if __name__ == '__main__':
    main()
