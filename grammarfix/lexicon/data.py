"""
Built-in English Word Lists
===========================
Static vocabulary used to build the default Lexicon.

Verb rows are (base, 3rd-person present, past, past participle, -ing).
Noun rows are (singular, plural).
"""

VERBS = [
    ('be', 'is', 'was', 'been', 'being'),
    ('have', 'has', 'had', 'had', 'having'),
    ('do', 'does', 'did', 'done', 'doing'),
    ('go', 'goes', 'went', 'gone', 'going'),
    ('say', 'says', 'said', 'said', 'saying'),
    ('get', 'gets', 'got', 'gotten', 'getting'),
    ('make', 'makes', 'made', 'made', 'making'),
    ('know', 'knows', 'knew', 'known', 'knowing'),
    ('think', 'thinks', 'thought', 'thought', 'thinking'),
    ('take', 'takes', 'took', 'taken', 'taking'),
    ('see', 'sees', 'saw', 'seen', 'seeing'),
    ('come', 'comes', 'came', 'come', 'coming'),
    ('want', 'wants', 'wanted', 'wanted', 'wanting'),
    ('use', 'uses', 'used', 'used', 'using'),
    ('find', 'finds', 'found', 'found', 'finding'),
    ('give', 'gives', 'gave', 'given', 'giving'),
    ('tell', 'tells', 'told', 'told', 'telling'),
    ('work', 'works', 'worked', 'worked', 'working'),
    ('call', 'calls', 'called', 'called', 'calling'),
    ('try', 'tries', 'tried', 'tried', 'trying'),
    ('eat', 'eats', 'ate', 'eaten', 'eating'),
    ('drink', 'drinks', 'drank', 'drunk', 'drinking'),
    ('run', 'runs', 'ran', 'run', 'running'),
    ('write', 'writes', 'wrote', 'written', 'writing'),
    ('read', 'reads', 'read', 'read', 'reading'),
    ('buy', 'buys', 'bought', 'bought', 'buying'),
    ('catch', 'catches', 'caught', 'caught', 'catching'),
    ('cut', 'cuts', 'cut', 'cut', 'cutting'),
    ('draw', 'draws', 'drew', 'drawn', 'drawing'),
    ('grow', 'grows', 'grew', 'grown', 'growing'),
    ('hit', 'hits', 'hit', 'hit', 'hitting'),
    ('hurt', 'hurts', 'hurt', 'hurt', 'hurting'),
    ('keep', 'keeps', 'kept', 'kept', 'keeping'),
    ('leave', 'leaves', 'left', 'left', 'leaving'),
    ('lose', 'loses', 'lost', 'lost', 'losing'),
    ('pay', 'pays', 'paid', 'paid', 'paying'),
    ('put', 'puts', 'put', 'put', 'putting'),
    ('seek', 'seeks', 'sought', 'sought', 'seeking'),
    ('send', 'sends', 'sent', 'sent', 'sending'),
    ('speak', 'speaks', 'spoke', 'spoken', 'speaking'),
    ('stand', 'stands', 'stood', 'stood', 'standing'),
    ('teach', 'teaches', 'taught', 'taught', 'teaching'),
    ('throw', 'throws', 'threw', 'thrown', 'throwing'),
    ('wake', 'wakes', 'woke', 'woken', 'waking'),
    ('win', 'wins', 'won', 'won', 'winning'),
    ('bring', 'brings', 'brought', 'brought', 'bringing'),
    ('begin', 'begins', 'began', 'begun', 'beginning'),
    ('drive', 'drives', 'drove', 'driven', 'driving'),
    ('fly', 'flies', 'flew', 'flown', 'flying'),
    ('forget', 'forgets', 'forgot', 'forgotten', 'forgetting'),
    ('hear', 'hears', 'heard', 'heard', 'hearing'),
    ('meet', 'meets', 'met', 'met', 'meeting'),
    ('sing', 'sings', 'sang', 'sung', 'singing'),
    ('sit', 'sits', 'sat', 'sat', 'sitting'),
    ('sleep', 'sleeps', 'slept', 'slept', 'sleeping'),
    ('swim', 'swims', 'swam', 'swum', 'swimming'),
    ('feel', 'feels', 'felt', 'felt', 'feeling'),
    ('become', 'becomes', 'became', 'become', 'becoming'),
    ('build', 'builds', 'built', 'built', 'building'),
    ('choose', 'chooses', 'chose', 'chosen', 'choosing'),
    ('fall', 'falls', 'fell', 'fallen', 'falling'),
    ('sell', 'sells', 'sold', 'sold', 'selling'),
    ('understand', 'understands', 'understood', 'understood', 'understanding'),
    ('wear', 'wears', 'wore', 'worn', 'wearing'),
    ('break', 'breaks', 'broke', 'broken', 'breaking'),
    ('walk', 'walks', 'walked', 'walked', 'walking'),
    ('talk', 'talks', 'talked', 'talked', 'talking'),
    ('play', 'plays', 'played', 'played', 'playing'),
    ('live', 'lives', 'lived', 'lived', 'living'),
    ('like', 'likes', 'liked', 'liked', 'liking'),
    ('love', 'loves', 'loved', 'loved', 'loving'),
    ('need', 'needs', 'needed', 'needed', 'needing'),
    ('help', 'helps', 'helped', 'helped', 'helping'),
    ('look', 'looks', 'looked', 'looked', 'looking'),
    ('start', 'starts', 'started', 'started', 'starting'),
    ('finish', 'finishes', 'finished', 'finished', 'finishing'),
    ('open', 'opens', 'opened', 'opened', 'opening'),
    ('close', 'closes', 'closed', 'closed', 'closing'),
    ('watch', 'watches', 'watched', 'watched', 'watching'),
    ('visit', 'visits', 'visited', 'visited', 'visiting'),
    ('study', 'studies', 'studied', 'studied', 'studying'),
    ('learn', 'learns', 'learned', 'learned', 'learning'),
    ('ask', 'asks', 'asked', 'asked', 'asking'),
    ('wait', 'waits', 'waited', 'waited', 'waiting'),
    ('travel', 'travels', 'traveled', 'traveled', 'traveling'),
    ('move', 'moves', 'moved', 'moved', 'moving'),
    ('stay', 'stays', 'stayed', 'stayed', 'staying'),
    ('arrive', 'arrives', 'arrived', 'arrived', 'arriving'),
    ('happen', 'happens', 'happened', 'happened', 'happening'),
    ('listen', 'listens', 'listened', 'listened', 'listening'),
    ('carry', 'carries', 'carried', 'carried', 'carrying'),
    ('cry', 'cries', 'cried', 'cried', 'crying'),
    ('wash', 'washes', 'washed', 'washed', 'washing'),
    ('cook', 'cooks', 'cooked', 'cooked', 'cooking'),
    ('jump', 'jumps', 'jumped', 'jumped', 'jumping'),
    ('clean', 'cleans', 'cleaned', 'cleaned', 'cleaning'),
    ('receive', 'receives', 'received', 'received', 'receiving'),
    ('believe', 'believes', 'believed', 'believed', 'believing'),
    ('occur', 'occurs', 'occurred', 'occurred', 'occurring'),
    ('accommodate', 'accommodates', 'accommodated', 'accommodated', 'accommodating'),
    ('separate', 'separates', 'separated', 'separated', 'separating'),
    ('orient', 'orients', 'oriented', 'oriented', 'orienting'),
]

NOUNS = [
    ('apple', 'apples'), ('orange', 'oranges'), ('egg', 'eggs'),
    ('cat', 'cats'), ('dog', 'dogs'), ('bird', 'birds'), ('fish', 'fish'),
    ('sheep', 'sheep'), ('horse', 'horses'), ('elephant', 'elephants'),
    ('book', 'books'), ('car', 'cars'), ('bike', 'bikes'), ('bus', 'buses'),
    ('train', 'trains'), ('plane', 'planes'), ('ticket', 'tickets'),
    ('house', 'houses'), ('home', 'homes'), ('room', 'rooms'), ('door', 'doors'),
    ('window', 'windows'), ('table', 'tables'), ('chair', 'chairs'),
    ('bed', 'beds'), ('desk', 'desks'), ('kitchen', 'kitchens'),
    ('garden', 'gardens'), ('wall', 'walls'), ('floor', 'floors'),
    ('building', 'buildings'), ('office', 'offices'),
    ('child', 'children'), ('person', 'people'), ('man', 'men'),
    ('woman', 'women'), ('mouse', 'mice'), ('tooth', 'teeth'),
    ('foot', 'feet'), ('goose', 'geese'), ('knife', 'knives'),
    ('leaf', 'leaves'), ('life', 'lives'), ('wife', 'wives'),
    ('box', 'boxes'), ('dish', 'dishes'), ('class', 'classes'),
    ('glass', 'glasses'), ('city', 'cities'), ('country', 'countries'),
    ('baby', 'babies'), ('party', 'parties'), ('story', 'stories'),
    ('family', 'families'), ('day', 'days'), ('key', 'keys'),
    ('toy', 'toys'), ('boy', 'boys'), ('girl', 'girls'), ('kid', 'kids'),
    ('friend', 'friends'), ('parent', 'parents'), ('mother', 'mothers'),
    ('father', 'fathers'), ('brother', 'brothers'), ('sister', 'sisters'),
    ('student', 'students'), ('teacher', 'teachers'), ('doctor', 'doctors'),
    ('school', 'schools'), ('university', 'universities'),
    ('college', 'colleges'), ('user', 'users'), ('phone', 'phones'),
    ('computer', 'computers'), ('idea', 'ideas'), ('problem', 'problems'),
    ('question', 'questions'), ('answer', 'answers'), ('year', 'years'),
    ('month', 'months'), ('week', 'weeks'), ('hour', 'hours'),
    ('minute', 'minutes'), ('umbrella', 'umbrellas'), ('island', 'islands'),
    ('movie', 'movies'), ('game', 'games'), ('song', 'songs'),
    ('letter', 'letters'), ('picture', 'pictures'), ('street', 'streets'),
    ('road', 'roads'), ('tree', 'trees'), ('flower', 'flowers'),
    ('shop', 'shops'), ('store', 'stores'), ('park', 'parks'),
    ('cup', 'cups'), ('bottle', 'bottles'), ('bag', 'bags'),
    ('shoe', 'shoes'), ('shirt', 'shirts'), ('hat', 'hats'), ('coat', 'coats'),
    ('pen', 'pens'), ('pencil', 'pencils'), ('word', 'words'),
    ('sentence', 'sentences'), ('page', 'pages'), ('plan', 'plans'),
    ('job', 'jobs'), ('meeting', 'meetings'), ('email', 'emails'),
    ('message', 'messages'), ('hotel', 'hotels'), ('restaurant', 'restaurants'),
    ('museum', 'museums'), ('library', 'libraries'), ('hospital', 'hospitals'),
    ('bank', 'banks'), ('market', 'markets'), ('beach', 'beaches'),
    ('mountain', 'mountains'), ('river', 'rivers'), ('lake', 'lakes'),
    ('herb', 'herbs'), ('honor', 'honors'), ('environment', 'environments'),
    ('government', 'governments'), ('business', 'businesses'),
    ('calendar', 'calendars'), ('piece', 'pieces'), ('exercise', 'exercises'),
    ('morning', 'mornings'), ('afternoon', 'afternoons'),
    ('evening', 'evenings'), ('night', 'nights'), ('weekend', 'weekends'),
    ('season', 'seasons'), ('time', 'times'), ('thing', 'things'),
    ('way', 'ways'), ('place', 'places'), ('name', 'names'),
]

ADJECTIVES = [
    'happy', 'sad', 'big', 'small', 'good', 'bad', 'fast', 'slow', 'tall',
    'short', 'long', 'old', 'young', 'new', 'nice', 'kind', 'hot', 'cold',
    'warm', 'cool', 'easy', 'hard', 'early', 'late', 'cheap', 'expensive',
    'beautiful', 'important', 'interesting', 'difficult', 'simple', 'strong',
    'weak', 'rich', 'poor', 'busy', 'quiet', 'loud', 'dirty', 'smart',
    'great', 'large', 'high', 'low', 'heavy', 'light', 'dark', 'bright',
    'safe', 'funny', 'pretty', 'ugly', 'angry', 'tired', 'hungry', 'ready',
    'sure', 'free', 'full', 'empty', 'fine', 'true', 'real', 'clear',
    'far', 'deep', 'wide', 'thin', 'thick', 'sweet', 'fresh', 'honest',
    'careful', 'useful', 'different', 'same', 'wrong', 'right', 'able',
    'weird', 'successful', 'necessary', 'definite', 'lazy', 'brave', 'calm',
    'wise', 'close', 'clean',
]

COMMON_WORDS = [
    # articles, determiners and quantifiers
    'a', 'an', 'the', 'this', 'that', 'these', 'those', 'some', 'any', 'no',
    'every', 'each', 'all', 'both', 'many', 'much', 'more', 'most', 'few',
    'little', 'less', 'least', 'other', 'another', 'such', 'lot', 'lots',
    # pronouns
    'i', 'me', 'my', 'mine', 'myself', 'you', 'your', 'yours', 'yourself',
    'he', 'him', 'his', 'himself', 'she', 'her', 'hers', 'herself', 'it',
    'its', 'itself', 'we', 'us', 'our', 'ours', 'ourselves', 'they', 'them',
    'their', 'theirs', 'themselves', 'who', 'whom', 'whose', 'which', 'what',
    'someone', 'something', 'anyone', 'anything', 'everyone', 'everything',
    'nobody', 'nothing', 'somebody', 'everybody',
    # auxiliaries, modals and negation
    'am', 'are', 'were', 'will', 'shall', 'can', 'could', 'may', 'might',
    'would', 'should', 'must', 'ought', 'not', "don't", "doesn't", "didn't",
    "can't", "won't", "isn't", "aren't", "wasn't", "weren't", "hasn't",
    "haven't", "hadn't", "shouldn't", "couldn't", "wouldn't", "mustn't",
    "i'm", "i've", "i'll", "i'd", "it's", "that's", "there's", "let's",
    # prepositions and conjunctions
    'at', 'in', 'on', 'to', 'for', 'from', 'with', 'without', 'by', 'of',
    'about', 'into', 'onto', 'over', 'under', 'between', 'through', 'during',
    'after', 'before', 'behind', 'near', 'around', 'across', 'along', 'up',
    'down', 'out', 'off', 'since', 'until', 'and', 'or', 'but', 'so', 'because',
    'if', 'when', 'while', 'although', 'though', 'than', 'as', 'then', 'where',
    'why', 'how', 'whether', 'unless',
    # adverbs
    'very', 'really', 'too', 'also', 'just', 'only', 'even', 'still', 'already',
    'always', 'never', 'often', 'sometimes', 'usually', 'rarely', 'again',
    'here', 'there', 'now', 'then', 'today', 'tonight', 'yesterday', 'tomorrow',
    'soon', 'later', 'ago', 'once', 'twice', 'yet', 'ever', 'almost', 'quite',
    'well', 'away', 'together', 'maybe', 'perhaps', 'please', 'yes', 'okay',
    'previously', 'earlier', 'formerly', 'currently', 'presently', 'nowadays',
    'eventually', 'definitely', 'every', 'regardless',
    # numbers
    'one', 'two', 'three', 'four', 'five', 'six', 'seven', 'eight', 'nine',
    'ten', 'hundred', 'thousand', 'first', 'second', 'third', 'last', 'next',
    # time words
    'monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday',
    'sunday', 'january', 'february', 'march', 'april', 'june', 'july',
    'august', 'september', 'october', 'november', 'december', 'spring',
    'summer', 'autumn', 'winter', 'noon', 'midnight', 'dawn', 'dusk',
    # uncountable nouns
    'water', 'milk', 'coffee', 'tea', 'juice', 'beer', 'wine', 'rice', 'bread',
    'meat', 'cheese', 'butter', 'sugar', 'salt', 'money', 'information',
    'knowledge', 'advice', 'news', 'music', 'art', 'happiness', 'anger',
    'fear', 'furniture', 'equipment', 'luggage', 'homework', 'weather',
    'traffic', 'pollution', 'research', 'progress', 'management', 'food',
    'paper', 'english', 'people',
    # misc
    'hello', 'hi', 'thanks', 'thank', 'sorry', 'like', 'than', 'which',
]

VOWELS = 'aeiou'
