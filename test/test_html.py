# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import htmlgen
from htmlgen import (a, begin_tag, button, button_input, checkbox, checkbox_list, css_file, drop_down_list, end_tag,
  file_input, hidden_input, img, input, js_file, label, list_box, mailto, ol, password_input, radio, radio_list,
  reset_button, script, style, submit_button, submit_input, tag, text_input, textarea, ul)
from htmlgen.config import default_config
from htmlgen.html import Html


def test_tag():
  assert tag('div', 'x', {'class': 'c'}) == '<div class="c">x</div>'
  assert tag('div') == '<div></div>'
  assert tag('p', '<b>raw</b>') == '<p><b>raw</b></p>'
  assert tag(None, 'content') == 'content'
  assert tag(False, 'content') == 'content'


def test_void_tags():
  assert tag('br', 'ignored') == '<br>'
  assert tag('IMG', 'x', {'src': 'a.png'}) == '<IMG src="a.png">'
  assert tag('input', '', {'type': 'text'}) == '<input type="text">'


def test_begin_end_tag():
  assert begin_tag('div', {'id': 'd'}) == '<div id="d">'
  assert end_tag('div') == '</div>'
  assert begin_tag(None) == ''
  assert end_tag(False) == ''


def test_config_void_elements():
  h = Html(default_config.derive(void_elements={'custom'}))
  assert h.tag('custom', 'x') == '<custom>'
  assert h.tag('br', 'x') == '<br>x</br>'
  assert tag('br', 'x') == '<br>'


def test_style_script():
  assert style('a {}') == '<style>a {}</style>'
  assert script('x', {'type': 'module'}) == '<script type="module">x</script>'


def test_css_file():
  assert css_file('/a.css') == '<link href="/a.css" rel="stylesheet">'
  assert css_file('/a.css', {'rel': 'alternate stylesheet'}) == '<link href="/a.css" rel="alternate stylesheet">'
  assert css_file('/a.css', {'condition': 'lt IE 9'}) == \
    '<!--[if lt IE 9]>\n<link href="/a.css" rel="stylesheet">\n<![endif]-->'
  assert css_file('/a.css', {'condition': '!IE'}) == \
    '<!--[if !IE]><!-->\n<link href="/a.css" rel="stylesheet">\n<!--<![endif]-->'
  assert css_file('/a.css', {'noscript': True}) == '<noscript><link href="/a.css" rel="stylesheet"></noscript>'


def test_js_file():
  assert js_file('/a.js') == '<script src="/a.js"></script>'
  assert js_file('/a.js', {'condition': 'IE 9'}) == '<!--[if IE 9]>\n<script src="/a.js"></script>\n<![endif]-->'


def test_links():
  assert a('Home', '/') == '<a href="/">Home</a>'
  assert a('x') == '<a>x</a>'
  assert a('q', '/?a=1&b=2') == '<a href="/?a=1&amp;b=2">q</a>'
  assert mailto('me@x.com') == '<a href="mailto:me@x.com">me@x.com</a>'
  assert mailto('Me', 'me@x.com', {'class': 'm'}) == '<a class="m" href="mailto:me@x.com">Me</a>'


def test_img():
  assert img('a.png') == '<img src="a.png" alt="">'
  assert img('a.png', {'alt': 'A'}) == '<img src="a.png" alt="A">'
  assert img('a.png', {'srcset': {'1x': 'a.png', '2x': 'b.png'}}) == '<img src="a.png" srcset="a.png 1x,b.png 2x" alt="">'


def test_label():
  assert label('Name', 'name') == '<label for="name">Name</label>'
  assert label('x') == '<label>x</label>'


def test_buttons():
  assert button() == '<button type="button">Button</button>'
  assert button('Go', {'type': 'submit'}) == '<button type="submit">Go</button>'
  assert submit_button() == '<button type="submit">Submit</button>'
  assert reset_button('R', {'class': 'b'}) == '<button type="reset" class="b">R</button>'


def test_input():
  assert input('text', 'n', 'v') == '<input type="text" name="n" value="v">'
  assert input('text') == '<input type="text">'
  assert input('text', 'n', options={'type': 'email'}) == '<input type="email" name="n">'
  assert text_input('n', 3) == '<input type="text" name="n" value="3">'
  assert hidden_input('h', '') == '<input type="hidden" name="h" value="">'
  assert password_input('p') == '<input type="password" name="p">'
  assert file_input('f') == '<input type="file" name="f">'
  assert button_input() == '<input type="button" value="Button">'
  assert submit_input('Go') == '<input type="submit" value="Go">'
  assert htmlgen.reset_input() == '<input type="reset" value="Reset">'


def test_textarea():
  assert textarea('t', '<b>') == '<textarea name="t">&lt;b&gt;</textarea>'
  assert textarea('t', None) == '<textarea name="t"></textarea>'


def test_checkbox_radio():
  assert checkbox('c') == '<input type="checkbox" name="c" value="1">'
  assert checkbox('c', True, {'value': 'yes'}) == '<input type="checkbox" name="c" value="yes" checked>'
  assert radio('r', options={'uncheck': '0'}) == '<input type="hidden" name="r" value="0"><input type="radio" name="r" value="1">'


def test_checkbox_uncheck_disabled():
  assert checkbox('c', False, {'uncheck': '0', 'disabled': True, 'form': 'f'}) == \
    '<input type="hidden" name="c" value="0" form="f" disabled><input type="checkbox" name="c" value="1" form="f" disabled>'


def test_checkbox_label():
  assert checkbox('c', False, {'label': 'Accept', 'label_options': {'class': 'l'}}) == \
    '<label class="l"><input type="checkbox" name="c" value="1"> Accept</label>'


def test_options_not_mutated():
  opts = {'prompt': 'P', 'label': 'L', 'uncheck': '0'}
  drop_down_list('s', None, {}, opts)
  checkbox('c', False, opts)
  assert opts == {'prompt': 'P', 'label': 'L', 'uncheck': '0'}


def test_drop_down_list():
  assert drop_down_list('s', '2', {1: 'A', 2: 'B'}) == \
    '<select name="s">\n<option value="1">A</option>\n<option value="2" selected>B</option>\n</select>'
  assert drop_down_list('s', None, {1: 'A'}, {'prompt': 'P', 'unselect': 'x', 'id': 'i'}) == \
    '<select id="i" name="s">\n<option value="">P</option>\n<option value="1">A</option>\n</select>'


def test_drop_down_list_multiple():
  assert drop_down_list('s', ['1'], {1: 'A'}, {'multiple': True}) == \
    '<select name="s[]" multiple size="4">\n<option value="1" selected>A</option>\n</select>'


def test_list_box():
  assert list_box('s', None, {1: 'A'}, {'unselect': '', 'disabled': True}) == \
    '<input type="hidden" name="s" value="" disabled><select name="s" disabled size="4">\n<option value="1">A</option>\n</select>'
  assert list_box('s', None, {}, {'size': 2}) == '<select name="s" size="2">\n\n</select>'


def test_checkbox_list():
  assert checkbox_list('c', ['a'], {'a': 'Apple', 'b': 'Banana & co'}) == \
    '<div><label><input type="checkbox" name="c[]" value="a" checked> Apple</label>\n' \
    '<label><input type="checkbox" name="c[]" value="b"> Banana &amp; co</label></div>'


def test_checkbox_list_formatter():
  fmt = lambda index, label, name, checked, value: f'{index}:{label}:{name}:{checked}:{value}'
  assert checkbox_list('c', 2, {1: 'A', 2: 'B'}, {'item': fmt, 'tag': False, 'separator': '|'}) == \
    '0:A:c[]:False:1|1:B:c[]:True:2'


def test_checkbox_list_unselect():
  assert checkbox_list('c', None, {'a': 'A'}, {'unselect': '0', 'tag': False}) == \
    '<input type="hidden" name="c" value="0"><label><input type="checkbox" name="c[]" value="a"> A</label>'


def test_radio_list():
  assert radio_list('r', 'b', {'a': 'A', 'b': 'B'}, {'class': 'rl'}) == \
    '<div class="rl"><label><input type="radio" name="r" value="a"> A</label>\n' \
    '<label><input type="radio" name="r" value="b" checked> B</label></div>'
  assert radio_list('r', None, {'a': '<A>'}, {'encode': False, 'tag': 'span', 'item_options': {'class': 'i'}}) == \
    '<span><label><input type="radio" class="i" name="r" value="a"> <A></label></span>'


def test_ul_ol():
  assert ul(['a', '<b>']) == '<ul>\n<li>a</li>\n<li>&lt;b&gt;</li>\n</ul>'
  assert ul([]) == '<ul></ul>'
  assert ol(['x'], {'class': 'o'}) == '<ol class="o">\n<li>x</li>\n</ol>'
  assert ul(['<b>x</b>'], {'encode': False, 'item_options': {'class': 'i'}}) == '<ul>\n<li class="i"><b>x</b></li>\n</ul>'


def test_ul_formatter():
  fmt = lambda item, index: f'<li data-i="{index}">{item}</li>'
  assert ul(['a', 'b'], {'item': fmt, 'separator': ''}) == '<ul><li data-i="0">a</li><li data-i="1">b</li></ul>'
  assert ul({'k': 'v'}, {'item': fmt}) == '<ul>\n<li data-i="k">v</li>\n</ul>'


def test_package_functions():
  assert htmlgen.render_tag_attributes({'value': 'v', 'type': 't'}) == ' type="t" value="v"'
  assert htmlgen.encode('<') == '&lt;'
  assert htmlgen.default_html.config is default_config


def test_input_value_coercion():
  assert text_input('n', 2.0) == '<input type="text" name="n" value="2">'
  assert hidden_input('h', 2.5) == '<input type="hidden" name="h" value="2.5">'
  assert text_input('n', 2.0) == f'<input{htmlgen.render_tag_attributes({"type": "text", "name": "n", "value": 2.0})}>'
