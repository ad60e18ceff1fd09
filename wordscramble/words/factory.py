from wordscramble.words.dictionary import DictionaryChecker, RemoteDictionary, WordListDictionary

def create_dictionary(provider: str, **kwargs) -> DictionaryChecker:
    provider = provider.lower()
    if provider == "remote":
        return RemoteDictionary(**kwargs)
    elif provider == "wordlist":
        path = kwargs.pop("path", None)
        if path is None:
            raise ValueError("The wordlist dictionary needs a path")
        return WordListDictionary.from_file(path, **kwargs)
    else:
        raise ValueError(f"Unknown dictionary provider: {provider}")
